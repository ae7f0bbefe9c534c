import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]  # repo root
PKG = ROOT / "cashflow_tvm"
IRR = PKG / "finance" / "irr.py"
NPV = PKG / "finance" / "npv.py"


def _defs(pattern: str):
    hits = []
    for p in PKG.rglob("*.py"):
        text = p.read_text(encoding="utf-8", errors="ignore")
        if re.search(pattern, text):
            hits.append(p)
    return hits


def test_only_irr_module_defines_irr():
    hits = _defs(r"\bdef\s+(solve_)?irr\s*\(")
    assert hits == [IRR], f"IRR defs outside finance/irr.py: {hits}"


def test_only_npv_module_defines_npv_and_fv():
    hits = _defs(r"\bdef\s+(npv|npv_schedule|npv_annuity|fv)\s*\(")
    assert hits == [NPV], f"NPV/FV defs outside finance/npv.py: {hits}"
