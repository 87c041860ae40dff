from __future__ import annotations

from typing import List

import pytest

from highlight_compare.schemas import Language


MODERN_HTML = """
<div class="markdown-heading">
    <h2 class="heading-element">LANG_NAME:JavaScript</h2>
    <a id="user-content-lang_namejavascript" class="anchor" href="#lang_namejavascript"></a>
</div>
<div class="highlight highlight-source-js">
    <pre><span class="pl-k">console</span>.log("test")</pre>
</div>
"""

LEGACY_HTML = """
<h2>LANG_NAME:Ruby</h2>
<div class="highlight highlight-source-ruby">
    <pre><span class="pl-k">puts</span> "test"</pre>
</div>
"""


def _heading(name: str, wrapped: bool) -> str:
    if wrapped:
        return (
            f'<div class="markdown-heading"><h2 class="heading-element">LANG_NAME:{name}</h2>'
            f'<a class="anchor" href="#lang_name{name.lower()}"></a></div>\n'
        )
    return f"<h2>LANG_NAME:{name}</h2>\n"


@pytest.fixture
def modern_html() -> str:
    return MODERN_HTML


@pytest.fixture
def legacy_html() -> str:
    return LEGACY_HTML


@pytest.fixture
def rendered_document() -> str:
    """Rendered response for five hints: two identical, one distinct, two unhighlighted."""
    js_block = (
        '<div class="highlight highlight-source-js"><pre>'
        '<span class="pl-en">console</span>.<span class="pl-c1">log</span>'
        '(<span class="pl-s"><span class="pl-pds">"</span>hello<span class="pl-pds">"</span></span>)'
        "</pre></div>\n"
    )
    ts_block = js_block.replace("highlight-source-js", "highlight-source-ts")
    py_block = (
        '<div class="highlight highlight-source-python"><pre>'
        'console.<span class="pl-en">log</span>'
        '(<span class="pl-s">"hello"</span>)'
        "</pre></div>\n"
    )
    return "".join([
        _heading("JavaScript", wrapped=True), js_block,
        _heading("Text", wrapped=True), '<pre lang="text"><code>console.log("hello")</code></pre>\n',
        _heading("Python", wrapped=False), py_block,
        _heading("Unknown", wrapped=True),
        _heading("TypeScript", wrapped=True), ts_block,
    ])


@pytest.fixture
def languages() -> List[Language]:
    return [
        Language(name="JavaScript", alias="javascript"),
        Language(name="Text", alias="text"),
        Language(name="Python", alias="python"),
        Language(name="Unknown", alias="unknown"),
        Language(name="TypeScript", alias="ts"),
    ]
