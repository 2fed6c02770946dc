"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from tests.conftest import SCENARIO_A_REQUEST


def bounded_text(min_size: int, max_size: int):
    return st.text(min_size=min_size, max_size=max_size).filter(lambda s: len(s) >= min_size)


@st.composite
def valid_requests(draw):
    """Generate random request payloads that satisfy every field bound."""
    return {
        "topic": draw(bounded_text(8, 200)),
        "tone": draw(bounded_text(3, 64)),
        "durationSeconds": draw(
            st.floats(min_value=30, max_value=900, allow_nan=False, allow_infinity=False)
        ),
        "audience": draw(bounded_text(3, 120)),
        "callToAction": draw(bounded_text(3, 180)),
    }


@st.composite
def requests_with_one_bad_field(draw):
    """A valid payload with exactly one field pushed outside its bounds."""
    field = draw(st.sampled_from(["topic", "tone", "durationSeconds", "audience", "callToAction"]))
    payload = dict(SCENARIO_A_REQUEST)
    if field == "topic":
        payload[field] = draw(st.text(max_size=7))
    elif field == "tone":
        payload[field] = draw(st.one_of(st.text(max_size=2), st.text(min_size=65, max_size=100)))
    elif field == "audience":
        payload[field] = draw(st.one_of(st.text(max_size=2), st.text(min_size=121, max_size=150)))
    elif field == "callToAction":
        payload[field] = draw(st.one_of(st.text(max_size=2), st.text(min_size=181, max_size=220)))
    else:
        payload[field] = draw(
            st.one_of(
                st.floats(max_value=29.99, allow_nan=False, allow_infinity=False),
                st.floats(min_value=900.01, allow_nan=False, allow_infinity=False),
            )
        )
    return field, payload
