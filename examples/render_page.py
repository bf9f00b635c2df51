"""
Demo script for Weft page building.

Run with:
    python examples/render_page.py
"""

from weft import js
from weft.dom import (
    DEFAULT_CHECKERS,
    attr,
    attr_id,
    dump_tree,
    elem,
    lf,
    parse_fragment,
    parse_html,
    script,
    text,
)
from weft.exceptions import CheckError, InvalidIdentifierError
from weft.logging import console, setup_logging


def demo_statements():
    """Render bindings, including hostile input."""
    print("\n=== Script Statements ===\n")

    user_input = '</script><script>alert("pwned")</script>'
    print(js.const_string("greeting", user_input))
    print(js.let_int("retries", 3))
    print(js.assign_bool("window.app.ready", True))
    print(js.const_json("config", {"theme": "dark", "items": [1, 2, 3]}))

    # Invalid names never produce a live binding
    print(js.let_string("1<bad", "value"))

    try:
        js.let_json("not-valid", {"a": 1})
    except InvalidIdentifierError as e:
        print(f"✓ Rejected: {e}")


def demo_page():
    """Build a page, parse a fragment into it and run the checkers."""
    print("\n=== Page Building ===\n")

    doc = parse_html("<!DOCTYPE html><title>Demo</title><main id='app'></main>")
    (main,) = doc.query("#app")

    main.append(
        elem("h1").set_classes("title").append(text("Hello & welcome")),
        lf(),
        *parse_fragment('<p class="lead">Parsed <b>fragment</b></p>'),
        lf(),
        elem("input")
        .set_attrs(attr("type", "text"), attr("name", "q"))
        .set_bool_attr("required", True),
        script(js.const_string("pageTitle", "Demo"), js.assign_int("window.app.version", 2)),
    )

    print(doc.render(*DEFAULT_CHECKERS))
    print(f"\n✓ {len(doc.input_text('input'))} text input(s)")

    console.print(dump_tree(main, attrs=True))

    # A duplicate id is caught at render time
    main.append(elem("div").set_attrs(attr_id("app")))
    try:
        doc.render(*DEFAULT_CHECKERS)
    except CheckError as e:
        print(f"✓ Check failed as expected: {e}")


def main():
    print("=" * 50)
    print("  WEFT - Demo")
    print("=" * 50)

    setup_logging(level="DEBUG")

    demo_statements()
    demo_page()


if __name__ == "__main__":
    main()
