"""HTML rendering for accessibility audit reports."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment

from .axe_log import load_axe_log
from .lighthouse import load_lighthouse
from .manual import load_manual_findings
from .metrics import score_cards, total_violations
from .schema import Report
from .screen_reader import load_screen_reader_dump

logger = logging.getLogger(__name__)

TEMPLATE = """<!DOCTYPE html>
<html lang=\"en\">
<head>
<meta charset=\"UTF-8\" />
<meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />
<title>{{ report.title }}</title>
<style>
:root { --bg:#0f172a; --surface:#1e293b; --surface-2:#334155; --text:#e2e8f0; --muted:#94a3b8; --accent:#38bdf8; --green:#34d399; --red:#f87171; --yellow:#fbbf24; --border:#475569; }
* { box-sizing:border-box; margin:0; padding:0; }
body { font-family: system-ui, -apple-system, sans-serif; background:var(--bg); color:var(--text); line-height:1.6; padding:2rem; }
main { max-width:960px; margin:0 auto; }
h1 { font-size:1.75rem; margin-bottom:.25rem; color:#fff; }
.subtitle { color:var(--muted); margin-bottom:2rem; font-size:.875rem; }
.score-row { display:flex; gap:1rem; margin-bottom:2rem; }
.score-card { flex:1; background:var(--surface); border:1px solid var(--border); border-radius:12px; padding:1.25rem; text-align:center; }
.score-card .label { font-size:.75rem; text-transform:uppercase; letter-spacing:.05em; color:var(--muted); margin-bottom:.5rem; }
.score-card .value { font-size:2rem; font-weight:700; }
.value.good { color:var(--green); }
.value.ok { color:var(--yellow); }
.value.bad { color:var(--red); }
section { background:var(--surface); border:1px solid var(--border); border-radius:12px; padding:1.5rem; margin-bottom:1.5rem; }
section h2 { font-size:1.125rem; margin-bottom:1rem; color:#fff; }
.violation { background:var(--surface-2); border-radius:8px; padding:1rem; margin-bottom:.75rem; border-left:3px solid var(--red); }
.violation .rule { font-weight:600; }
.violation .occurrences { color:var(--muted); font-weight:400; font-size:.8125rem; margin-left:.5rem; }
.violation .desc, .violation .elements { color:var(--muted); font-size:.8125rem; margin-bottom:.5rem; }
code { background:var(--bg); padding:.125rem .375rem; border-radius:4px; font-size:.75rem; color:var(--accent); }
.badge { display:inline-block; padding:.125rem .5rem; border-radius:9999px; font-size:.6875rem; font-weight:600; text-transform:uppercase; background:#4b5563; color:#f3f4f6; }
.badge.critical { background:#991b1b; color:#fecaca; }
.badge.serious { background:#9a3412; color:#fed7aa; }
.badge.moderate { background:#854d0e; color:#fef08a; }
.badge.minor { background:#1e40af; color:#bfdbfe; }
table { width:100%; border-collapse:collapse; font-size:.8125rem; }
th { text-align:left; padding:.5rem .75rem; color:var(--muted); font-size:.75rem; text-transform:uppercase; border-bottom:1px solid var(--border); }
td { padding:.625rem .75rem; border-bottom:1px solid var(--surface-2); vertical-align:top; }
a { color:var(--accent); }
.empty { text-align:center; color:var(--green); padding:2rem; }
pre { white-space:pre-wrap; background:var(--bg); padding:1rem; border-radius:8px; font-size:.75rem; overflow-x:auto; }
</style>
</head>
<body>
<main>
<header>
<h1>{{ report.title }}</h1>
<p class=\"subtitle\">Generated {{ generated }}</p>
</header>
<div class=\"score-row\">
{% for card in cards %}
<div class=\"score-card\">
  <div class=\"label\">{{ card.label }}</div>
  <div class=\"value {{ card.band }}\">{{ card.value }}</div>
</div>
{% endfor %}
</div>
<section aria-labelledby=\"axe-h2\">
<h2 id=\"axe-h2\">axe-core Violations</h2>
{% if not report.violations %}
<div class=\"empty\"><div aria-hidden=\"true\">&#x2705;</div>No violations found</div>
{% else %}
{% for v in report.violations %}
<div class=\"violation\">
  <div class=\"rule\">{{ v.rule }}<span class=\"occurrences\">({{ v.count }} occurrence{{ 's' if v.count > 1 }})</span></div>
  <div class=\"desc\">{{ v.description }}</div>
  <div class=\"elements\">Elements: {% for e in v.elements %}<code>{{ e }}</code>{{ ', ' if not loop.last }}{% endfor %}</div>
  {% if v.help_url %}<div><a href=\"{{ v.help_url }}\" target=\"_blank\" rel=\"noopener\">Learn more &rarr;</a></div>{% endif %}
</div>
{% endfor %}
{% endif %}
</section>
{% if report.manual_findings %}
<section aria-labelledby=\"manual-h2\">
<h2 id=\"manual-h2\">Manual Code Review Findings</h2>
<table>
<thead>
<tr><th>Severity</th><th>Issue</th><th>Location</th><th>WCAG</th><th>Proposed Fix</th></tr>
</thead>
<tbody>
{% for f in report.manual_findings %}
<tr>
  <td><span class=\"badge {{ f.severity }}\">{{ f.severity }}</span></td>
  <td>{{ f.issue }}</td>
  <td><code>{{ f.location }}</code></td>
  <td>{{ f.wcag or '' }}</td>
  <td>{{ f.fix }}</td>
</tr>
{% endfor %}
</tbody>
</table>
</section>
{% endif %}
{% if report.lighthouse.failing_audits %}
<section aria-labelledby=\"lighthouse-h2\">
<h2 id=\"lighthouse-h2\">Lighthouse Failing Audits</h2>
<table>
<thead>
<tr><th>Audit</th><th>Items</th></tr>
</thead>
<tbody>
{% for a in report.lighthouse.failing_audits %}
<tr>
  <td>{{ a.title }}</td>
  <td>{{ a.item_count }}</td>
</tr>
{% endfor %}
</tbody>
</table>
</section>
{% endif %}
{% if report.screen_reader %}
<section aria-labelledby=\"sr-h2\">
<h2 id=\"sr-h2\">Screen Reader Accessibility Tree</h2>
<pre>{{ report.screen_reader }}</pre>
</section>
{% endif %}
</main>
</body>
</html>
"""

# Every interpolated value goes through MarkupSafe escaping.
_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
_template = _env.from_string(TEMPLATE)


def build_report(
    axe: Optional[Union[str, Path]] = None,
    lighthouse_json: Optional[Union[str, Path]] = None,
    manual: Optional[str] = None,
    manual_file: Optional[Union[str, Path]] = None,
    screen_reader: Optional[Union[str, Path]] = None,
    phase: str = "pre",
    generated_at: Optional[datetime] = None,
) -> Report:
    """Load every available input into a Report. Bad inputs degrade, never raise."""
    report = Report(
        phase=phase,
        generated_at=generated_at or datetime.now(),
        lighthouse=load_lighthouse(lighthouse_json),
        violations=load_axe_log(axe),
        manual_findings=load_manual_findings(manual_file, manual),
        screen_reader=load_screen_reader_dump(screen_reader),
    )
    logger.info(
        "Collected %d axe-core violation(s) across %d rule(s), %d manual finding(s), Lighthouse score %s",
        total_violations(report.violations),
        len(report.violations),
        len(report.manual_findings),
        report.lighthouse.score if report.lighthouse.score is not None else "N/A",
    )
    return report


def render_html(report: Report) -> str:
    return _template.render(
        report=report,
        cards=score_cards(report),
        generated=report.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
    )


def write_report(report: Report, out_html: Union[str, Path]) -> Path:
    out = Path(out_html)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_html(report), encoding="utf-8")
    return out


__all__ = ["TEMPLATE", "build_report", "render_html", "write_report"]
