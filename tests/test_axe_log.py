from a11y_audit_report.axe_log import load_axe_log, parse_scan_log
from a11y_audit_report.metrics import total_violations


def test_parse_blocks_in_order(axe_log_text):
    violations = parse_scan_log(axe_log_text)
    assert [v.rule for v in violations] == ["image-alt", "label"]
    assert [v.count for v in violations] == [3, 1]
    assert total_violations(violations) == 4


def test_parse_block_details(axe_log_text):
    first, second = parse_scan_log(axe_log_text)
    assert first.description.startswith("Ensures <img> elements have alternate text")
    assert first.elements == ["img", ".hero > img", "#logo"]
    assert first.help_url == "https://dequeuniversity.com/rules/axe/4.8/image-alt?application=axeAPI"
    assert second.elements == ['input[name="email"]']


def test_summary_line_ends_last_block(axe_log_text):
    last = parse_scan_log(axe_log_text)[-1]
    assert last.elements == ['input[name="email"]']
    assert "Accessibility issues detected" not in last.description


def test_block_without_url_or_elements():
    text = 'Violation of "region" with 2 occurrences!\n  All page content should be contained by landmarks\n'
    (v,) = parse_scan_log(text)
    assert v.rule == "region"
    assert v.count == 2
    assert v.description == "All page content should be contained by landmarks"
    assert v.elements == []
    assert v.help_url is None


def test_zero_count_block_is_dropped():
    text = 'Violation of "list" with 0 occurrences!\n  Ensures lists are structured\n'
    assert parse_scan_log(text) == []


def test_no_violations():
    assert parse_scan_log("0 violations found!\n") == []
    assert parse_scan_log("") == []


def test_load_strips_ansi(tmp_path, axe_log_text):
    colored = axe_log_text.replace('Violation of "image-alt"', '\x1b[31m\x1b[1mViolation of "image-alt"\x1b[22m')
    colored = colored.replace("     - img\n", "     - \x1b[33mimg\x1b[39m\n")
    log = tmp_path / "axe.txt"
    log.write_text(colored, encoding="utf-8")
    violations = load_axe_log(log)
    assert len(violations) == 2
    assert violations[0].elements[0] == "img"


def test_load_file(axe_log_file):
    assert [v.rule for v in load_axe_log(axe_log_file)] == ["image-alt", "label"]


def test_load_missing_file(tmp_path, caplog):
    assert load_axe_log(tmp_path / "nope.txt") == []
    assert "axe-core log not found" in caplog.text
    assert load_axe_log(None) == []


def test_header_text_inside_a_block_does_not_split_it():
    text = (
        'Violation of "aria-label" with 1 occurrence!\n'
        '  Ensures ARIA labels are meaningful. Correct invalid elements at:\n'
        '   - div[title=\'Violation of "x" with 2 occurrences\']\n'
    )
    (v,) = parse_scan_log(text)
    assert v.rule == "aria-label"
    assert v.elements == ['div[title=\'Violation of "x" with 2 occurrences\']']
