"""Shared hypothesis strategies for brace property-based testing.

- **Text**: literal template text without braces
- **Templates**: arbitrarily nested, balanced brace structures
- **Data**: JSON-like values for the runtime
"""

from __future__ import annotations

from hypothesis import strategies as st

# ---------------------------------------------------------------------------
# Text strategies
# ---------------------------------------------------------------------------

# Literal text that does NOT contain braces
plain_text = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs",),  # no surrogates
        blacklist_characters="{}",
    ),
    max_size=30,
)

# ---------------------------------------------------------------------------
# Template strategies
# ---------------------------------------------------------------------------

# Balanced templates: text interleaved with nested {...} groups
balanced_template = st.recursive(
    plain_text,
    lambda inner: st.lists(
        st.one_of(inner, inner.map(lambda s: "{" + s + "}")),
        max_size=4,
    ).map("".join),
    max_leaves=20,
)

# One extra `{` between two balanced halves: never closed
unclosed_template = st.tuples(balanced_template, balanced_template).map(
    lambda halves: halves[0] + "{" + halves[1]
)

# One extra `}` between two balanced halves: closes nothing
stray_close_template = st.tuples(balanced_template, balanced_template).map(
    lambda halves: halves[0] + "}" + halves[1]
)

# ---------------------------------------------------------------------------
# Data strategies
# ---------------------------------------------------------------------------

key = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)

scalar = st.one_of(
    st.integers(min_value=-(10**6), max_value=10**6),
    st.text(max_size=10),
    st.booleans(),
)

json_like = st.recursive(
    scalar,
    lambda inner: st.one_of(
        st.lists(inner, max_size=4),
        st.dictionaries(key, inner, max_size=4),
    ),
    max_leaves=12,
)
