import pytest

AXE_LOG = """
Running axe-core 4.8.2 in chrome-headless

Testing http://localhost:3000 ... please wait, this may take a minute.

  Violation of "image-alt" with 3 occurrences!
    Ensures <img> elements have alternate text or a role of none or presentation. Correct invalid elements at:
     - img
     - .hero > img
     - #logo
    For details, see: https://dequeuniversity.com/rules/axe/4.8/image-alt?application=axeAPI

  Violation of "label" with 1 occurrence!
    Ensures every form element has a label. Correct invalid elements at:
     - input[name="email"]
    For details, see: https://dequeuniversity.com/rules/axe/4.8/label?application=axeAPI

4 Accessibility issues detected.
"""


@pytest.fixture
def axe_log_text():
    """Two violation blocks (image-alt x3, label x1) as printed by the axe-core CLI."""
    return AXE_LOG


@pytest.fixture
def axe_log_file(tmp_path, axe_log_text):
    p = tmp_path / "axe-output.txt"
    p.write_text(axe_log_text, encoding="utf-8")
    return p
