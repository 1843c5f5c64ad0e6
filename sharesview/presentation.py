"""
Presentation controller for the shares-outstanding page.

A ``ViewModel`` is built once per request and passed by reference to
``show_loading`` / ``show_content`` / ``show_error``; exactly one of the
loader, content and error panels is visible at any time.
``render_page`` turns the view model into HTML.
"""

from __future__ import annotations
import html
from dataclasses import dataclass
from typing import Any, Dict, Union

from sharesview.models import ExtremaResult, Failure, LoadOutcome, ViewState

TITLE_SUFFIX = "Shares Outstanding"


@dataclass
class ViewModel:
    state: ViewState = ViewState.LOADING
    page_title: str = TITLE_SUFFIX
    heading: str = TITLE_SUFFIX
    entity_name: str = ""
    max_value: str = ""
    max_fy: str = ""
    min_value: str = ""
    min_fy: str = ""
    error_message: str = ""

    @property
    def loader_visible(self) -> bool:
        return self.state == ViewState.LOADING

    @property
    def content_visible(self) -> bool:
        return self.state == ViewState.CONTENT

    @property
    def error_visible(self) -> bool:
        return self.state == ViewState.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "page_title": self.page_title,
            "heading": self.heading,
            "entity_name": self.entity_name,
            "max_value": self.max_value,
            "max_fy": self.max_fy,
            "min_value": self.min_value,
            "min_fy": self.min_fy,
            "error_message": self.error_message,
            "loader_visible": self.loader_visible,
            "content_visible": self.content_visible,
            "error_visible": self.error_visible,
        }


def format_shares(val: Union[int, float]) -> str:
    """Thousands-grouped, at most 3 fraction digits (en-US toLocaleString)."""
    if isinstance(val, float):
        if val.is_integer():
            return f"{int(val):,}"
        text = f"{val:,.3f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text
    return f"{val:,}"


def show_loading(view: ViewModel) -> None:
    view.state = ViewState.LOADING
    view.error_message = ""


def show_content(view: ViewModel, result: ExtremaResult) -> None:
    title = f"{result.entity_name} | {TITLE_SUFFIX}"
    view.page_title = title
    view.heading = title
    view.entity_name = result.entity_name
    view.max_value = format_shares(result.max.val)
    view.max_fy = str(result.max.fy)
    view.min_value = format_shares(result.min.val)
    view.min_fy = str(result.min.fy)
    view.error_message = ""
    view.state = ViewState.CONTENT


def show_error(view: ViewModel, message: str) -> None:
    view.error_message = message
    view.state = ViewState.ERROR


def apply_outcome(view: ViewModel, outcome: LoadOutcome) -> None:
    if isinstance(outcome, ExtremaResult):
        show_content(view, outcome)
    elif isinstance(outcome, Failure):
        show_error(view, outcome.user_message)
    else:
        raise TypeError(f"unexpected load outcome: {type(outcome).__name__}")


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def _display(visible: bool) -> str:
    return "" if visible else ' style="display:none"'


def render_page(view: ViewModel) -> str:
    e = html.escape
    return f"""<!doctype html>
<html><head><meta charset="utf-8"/><meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>{e(view.page_title)}</title>
<style>
  body {{ margin:0; background:#0b0d10; color:#e9eef5; font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial; }}
  .wrap {{ max-width: 720px; margin:0 auto; padding: 24px 16px 44px; }}
  h1 {{ font-size: 20px; margin: 0 0 16px; }}
  .card {{ background:#0f1318; border:1px solid #1c2530; border-radius:16px; padding: 14px; margin-bottom: 12px; }}
  .label {{ color:#a6b2c2; font-size: 13px; }}
  .value {{ font-size: 22px; }}
  #error-message {{ color:#ff8a8a; border-color:#5a2a2a; }}
</style>
</head><body>
  <div class="wrap">
    <h1>{e(view.heading)}</h1>
    <div id="loader" class="card"{_display(view.loader_visible)}>Loading...</div>
    <div id="error-message" class="card"{_display(view.error_visible)}>{e(view.error_message)}</div>
    <div id="content"{_display(view.content_visible)}>
      <div class="card">
        <div class="label">Entity</div>
        <div class="value" id="share-entity-name">{e(view.entity_name)}</div>
      </div>
      <div class="card">
        <div class="label">Maximum shares outstanding (FY <span id="share-max-fy">{e(view.max_fy)}</span>)</div>
        <div class="value" id="share-max-value">{e(view.max_value)}</div>
      </div>
      <div class="card">
        <div class="label">Minimum shares outstanding (FY <span id="share-min-fy">{e(view.min_fy)}</span>)</div>
        <div class="value" id="share-min-value">{e(view.min_value)}</div>
      </div>
    </div>
  </div>
</body></html>
"""
