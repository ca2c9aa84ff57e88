import json

from a11y_audit_report.config import load_config


def test_no_config():
    settings = load_config(None)
    assert settings.output is None
    assert settings.phase is None


def test_relative_paths_resolved_against_config_dir(tmp_path):
    cfg = tmp_path / "conf" / "report.yaml"
    cfg.parent.mkdir()
    cfg.write_text("axe: ../a11y/axe.txt\noutput: /abs/report.html\nphase: post\nunknown: 1\n", encoding="utf-8")
    settings = load_config(cfg)
    assert settings.axe == str(cfg.parent.resolve() / "../a11y/axe.txt")
    assert settings.output == "/abs/report.html"
    assert settings.phase == "post"


def test_manual_list_becomes_json(tmp_path):
    cfg = tmp_path / "report.yaml"
    cfg.write_text(
        "manual:\n  - severity: minor\n    issue: Missing lang\n    location: index.html:1\n    fix: Add lang\n",
        encoding="utf-8",
    )
    settings = load_config(cfg)
    assert json.loads(settings.manual) == [
        {"severity": "minor", "issue": "Missing lang", "location": "index.html:1", "fix": "Add lang"}
    ]


def test_missing_or_malformed_config_warns(tmp_path, caplog):
    assert load_config(tmp_path / "absent.yaml").output is None
    bad = tmp_path / "bad.yaml"
    bad.write_text("output: [unclosed\n", encoding="utf-8")
    assert load_config(bad).output is None
    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- a\n- b\n", encoding="utf-8")
    assert load_config(not_mapping).output is None
    assert caplog.text.count("WARNING") == 3
