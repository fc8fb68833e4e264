import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGES = ("assistant", "config", "domain", "extraction", "fields", "input_readers", "interface", "writers")

# a backslash between "{" and "}" of a one-line f-string; rejected before Python 3.12
FSTRING_BACKSLASH = re.compile(r"""(?<![\w])[rR]?[fF][rR]?(["'])[^\n]*?\{[^{}\n]*\\""")


def test_fstring_expressions_have_no_backslashes():
    offenders = []
    for package in PACKAGES:
        for path in sorted((ROOT / package).glob("*.py")):
            for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
                if FSTRING_BACKSLASH.search(line):
                    offenders.append(f"{path.relative_to(ROOT)}:{lineno}")
    assert offenders == []
