"""Streamlit playground for treeify."""

from __future__ import annotations

import json

import streamlit as st

from treeify.models import DEFAULT_CHARACTERS, RenderOptions, TreeCharacters
from treeify.tree_builder import InvalidRootError
from treeify.tree_renderer import render

EXAMPLE_INPUT = [
    "Lumon Industries",
    [
        "Board of Directors",
        ["Natalie (Representative)"],
        "Department Heads",
        [
            "Cobel (MDR)",
            ["Milchick", "Mark S.", ["Dylan G.", "Irving B.", "Helly R."]],
        ],
    ],
]


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="treeify",
        page_icon="🌲",
        layout="wide",
    )

    st.title("treeify")
    st.caption("Render a nested JSON list of strings as a text tree.")

    raw_input = st.text_area(
        "Tree (JSON)",
        value=json.dumps(EXAMPLE_INPUT, indent=2, ensure_ascii=False),
        height=300,
        help=(
            "The first element is the root. A string followed by a list "
            "holds that list as its children."
        ),
    )

    plain = st.checkbox(
        "Plain characters",
        value=_qp("plain") in ("1", "true"),
        help="Indent with spaces instead of box-drawing characters.",
    )

    with st.expander("Custom characters", expanded=False):
        use_custom = st.checkbox("Use custom characters", value=False)
        branch = st.text_input("Branch", value=DEFAULT_CHARACTERS.branch)
        last_branch = st.text_input(
            "Last branch", value=DEFAULT_CHARACTERS.last_branch
        )
        pipe = st.text_input("Pipe", value=DEFAULT_CHARACTERS.pipe)
        space = st.text_input("Space", value=DEFAULT_CHARACTERS.space)

    characters = None
    if use_custom:
        characters = TreeCharacters(
            branch=branch, last_branch=last_branch, pipe=pipe, space=space
        )

    _show_result(raw_input, RenderOptions(plain=plain, characters=characters))


def _show_result(raw_input: str, options: RenderOptions) -> None:
    """Parse the JSON input and display the rendered tree."""
    try:
        items = json.loads(raw_input)
    except json.JSONDecodeError as exc:
        st.error(f"Invalid JSON: {exc}")
        return

    try:
        output = render(items, options)
    except InvalidRootError as exc:
        st.error(str(exc))
        return

    if not output:
        st.warning("Nothing to render. Enter a non-empty JSON list.")
        return

    st.code(output, language=None)
    st.caption(f"{len(output.splitlines()):,} lines")


if __name__ == "__main__":
    main()
