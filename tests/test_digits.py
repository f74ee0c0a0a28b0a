"""Tests for the digit transform and state update."""

from hilbert_index.digits import next_state, t, t_inv


def test_t_inv_undoes_t():
    for dim in range(1, 6):
        for e in range(1 << dim):
            for d in range(dim):
                for b in range(1 << dim):
                    assert t_inv(t(b, e, d, dim), e, d, dim) == b


def test_t_at_origin_state():
    # e=0, d=0 is a right rotation by one
    assert t(0b001, 0, 0, 3) == 0b100
    assert t_inv(0b100, 0, 0, 3) == 0b001


def test_next_state_first_digit():
    assert next_state(0, 0, 0, 3) == (0, 1)
    assert next_state(3, 0, 0, 3) == (0b110, 0)
    assert next_state(7, 0, 0, 3) == (0b011, 1)


def test_next_state_direction_in_range():
    for dim in range(1, 7):
        for w in range(1 << dim):
            for d in range(dim):
                e, nd = next_state(w, 0, d, dim)
                assert 0 <= nd < dim
                assert 0 <= e < (1 << dim)
