"""
Test Suite: Gate Rule Table
===========================

Checks every entry of the gate rule table against a hand trace, plus the
self-inverse properties of the swap and Hadamard rules.

The amplitudes used here are distinct primes so that any swap or sign
flip is visible in the result.
"""

import warnings

import pytest
import numpy as np

from twoqubit_simulator import (
    AmplitudeVector,
    GATE_RULES,
    GATE_SET,
    UnknownGateWarning,
    apply_gate,
    apply_hadamard,
    is_known_gate,
    parse_gate_sequence,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def marked_state() -> AmplitudeVector:
    """Unnormalized vector with a distinct value in every slot."""
    return AmplitudeVector.from_amplitudes([2.0, 3.0, 5.0, 7.0, 11.0, 13.0, 17.0, 19.0])


def expected_after(values, **changes):
    out = list(values)
    for key, value in changes.items():
        out[int(key[1:])] = value
    return np.array(out)


BASE = [2.0, 3.0, 5.0, 7.0, 11.0, 13.0, 17.0, 19.0]


# =============================================================================
# RULE TABLE
# =============================================================================

class TestRuleTable:
    """Each token mutates exactly the indices listed in the rule table."""

    @pytest.mark.parametrize("token, expected", [
        ("x0", expected_after(BASE, i0=3.0, i1=2.0)),
        ("x1", expected_after(BASE, i1=7.0, i3=3.0)),
        ("y0", expected_after(BASE, i0=-2.0)),
        ("y1", expected_after(BASE, i1=-3.0)),
        ("z0", expected_after(BASE, i2=-5.0)),
        ("z1", expected_after(BASE, i1=-3.0)),
        ("cx", expected_after(BASE, i1=7.0, i3=3.0)),
        ("sw", expected_after(BASE, i1=5.0, i2=3.0)),
    ])
    def test_swap_and_sign_rules(self, marked_state, token, expected):
        assert apply_gate(marked_state, token) is True
        np.testing.assert_array_equal(marked_state.as_numpy(), expected)

    def test_h0_mixes_indices_0_and_2(self, marked_state):
        apply_gate(marked_state, "h0")
        s = np.sqrt(2.0)
        expected = expected_after(BASE, i0=(2.0 + 5.0) / s, i2=(2.0 - 5.0) / s)
        np.testing.assert_allclose(marked_state.as_numpy(), expected)

    def test_h1_mixes_indices_1_and_3(self, marked_state):
        """h1 uses base index 1 with the fixed offset of 2 (pair 1, 3)."""
        apply_gate(marked_state, "h1")
        s = np.sqrt(2.0)
        expected = expected_after(BASE, i1=(3.0 + 7.0) / s, i3=(3.0 - 7.0) / s)
        np.testing.assert_allclose(marked_state.as_numpy(), expected)

    def test_no_gate_touches_upper_half(self, marked_state):
        """Indices 4-7 are never addressed by any rule."""
        for token in GATE_SET:
            apply_gate(marked_state, token)
        np.testing.assert_array_equal(marked_state.as_numpy()[4:], BASE[4:])

    def test_rule_table_matches_gate_set(self):
        assert tuple(GATE_RULES) == GATE_SET
        assert all(is_known_gate(t) for t in GATE_SET)
        assert not is_known_gate("H0")

    def test_vector_keeps_eight_entries(self):
        state = AmplitudeVector.ground()
        for token in ["h0", "x1", "sw", "h1", "cx", "y0", "z1"]:
            apply_gate(state, token)
            assert len(state) == 8

    def test_application_is_deterministic(self):
        seq = ["h0", "x0", "h1", "sw", "z0", "h0"]
        a, b = AmplitudeVector.ground(), AmplitudeVector.ground()
        for token in seq:
            apply_gate(a, token)
            apply_gate(b, token)
        np.testing.assert_array_equal(a.as_numpy(), b.as_numpy())

    def test_gates_preserve_norm(self):
        state = AmplitudeVector.ground()
        for token in ["h0", "h1", "x0", "sw", "h1", "y1", "cx", "h0"]:
            apply_gate(state, token)
        assert state.squared_norm() == pytest.approx(1.0)


# =============================================================================
# SELF-INVERSE PROPERTIES
# =============================================================================

class TestSelfInverse:

    def test_h0_twice_restores_pair(self, marked_state):
        apply_gate(marked_state, "h0")
        apply_gate(marked_state, "h0")
        np.testing.assert_allclose(marked_state.as_numpy(), BASE, atol=1e-12)

    def test_h1_twice_restores_pair(self, marked_state):
        apply_hadamard(marked_state, 1)
        apply_hadamard(marked_state, 1)
        np.testing.assert_allclose(marked_state.as_numpy(), BASE, atol=1e-12)

    def test_x0_twice_restores_pair(self, marked_state):
        apply_gate(marked_state, "x0")
        apply_gate(marked_state, "x0")
        np.testing.assert_array_equal(marked_state.as_numpy(), BASE)

    def test_order_matters(self):
        a, b = AmplitudeVector.ground(), AmplitudeVector.ground()
        for token in ["h0", "x0"]:
            apply_gate(a, token)
        for token in ["x0", "h0"]:
            apply_gate(b, token)
        assert not np.allclose(a.as_numpy(), b.as_numpy())


# =============================================================================
# UNKNOWN TOKENS
# =============================================================================

class TestUnknownGate:

    def test_unknown_token_warns_once_and_leaves_vector(self, marked_state):
        with pytest.warns(UnknownGateWarning) as record:
            applied = apply_gate(marked_state, "q9")
        assert applied is False
        assert len(record) == 1
        assert "q9" in str(record[0].message)
        np.testing.assert_array_equal(marked_state.as_numpy(), BASE)

    def test_tokens_are_case_sensitive(self, marked_state):
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("always")
            apply_gate(marked_state, "X0")
        assert [w.category for w in record] == [UnknownGateWarning]


# =============================================================================
# PARSING
# =============================================================================

class TestParseGateSequence:

    def test_splits_on_commas_and_strips_whitespace(self):
        assert parse_gate_sequence(" h0 , h1\n") == ["h0", "h1"]

    def test_removes_inner_whitespace(self):
        assert parse_gate_sequence("h 0,\tx1\r\n") == ["h0", "x1"]

    def test_empty_line_gives_one_empty_token(self):
        assert parse_gate_sequence("\n") == [""]

    def test_trailing_comma_gives_empty_token(self):
        assert parse_gate_sequence("x0,") == ["x0", ""]

    def test_order_is_kept(self):
        assert parse_gate_sequence("sw,h0,cx,h0") == ["sw", "h0", "cx", "h0"]
