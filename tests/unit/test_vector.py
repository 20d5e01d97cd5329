"""Unit tests for Vector3 and Body."""

import pytest

from moonsim.core.vector import Vector3, ZERO
from moonsim.core.body import Body, copy_system, make_system, state_key


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_add(self):
        """Component-wise addition."""
        assert Vector3(1, -2, 3) + Vector3(4, 5, -6) == Vector3(5, 3, -3)

    def test_sub(self):
        """Component-wise subtraction."""
        assert Vector3(1, -2, 3) - Vector3(4, 5, -6) == Vector3(-3, -7, 9)

    def test_neg(self):
        """Negation flips every component."""
        assert -Vector3(1, -2, 0) == Vector3(-1, 2, 0)

    def test_zero_is_identity(self):
        """ZERO is the additive identity."""
        v = Vector3(7, -8, 9)
        assert v + ZERO == v
        assert v - v == ZERO

    def test_immutable(self):
        """Vectors cannot be modified."""
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_indexing_and_iteration(self):
        """Components by index and by iteration."""
        v = Vector3(4, 5, 6)
        assert [v[0], v[1], v[2]] == [4, 5, 6]
        assert list(v) == [4, 5, 6]
        assert v.as_tuple() == (4, 5, 6)

    def test_manhattan(self):
        """|x| + |y| + |z|."""
        assert Vector3(-3, 4, -5).manhattan() == 12
        assert ZERO.manhattan() == 0

    def test_hashable(self):
        """Equal vectors hash equally."""
        assert len({Vector3(1, 2, 3), Vector3(1, 2, 3), Vector3(3, 2, 1)}) == 2


class TestBody:
    """Tests for Body and system keys."""

    def test_new_body_at_rest(self):
        """Body.at gives zero velocity."""
        body = Body.at(1, 2, 3)
        assert body.pos == Vector3(1, 2, 3)
        assert body.vel == ZERO

    def test_structural_equality(self):
        """Bodies compare by position and velocity."""
        assert Body(Vector3(1, 2, 3), Vector3(0, 1, 0)) == Body(Vector3(1, 2, 3), Vector3(0, 1, 0))
        assert Body(Vector3(1, 2, 3)) != Body(Vector3(1, 2, 3), Vector3(0, 1, 0))

    def test_copy_is_independent(self):
        """A copy does not share updates."""
        body = Body.at(1, 1, 1)
        clone = body.copy()
        clone.vel = Vector3(5, 5, 5)
        assert body.vel == ZERO

    def test_make_system_accepts_tuples(self):
        """Positions may be tuples or vectors."""
        system = make_system([(1, 2, 3), Vector3(4, 5, 6)])
        assert [b.pos for b in system] == [Vector3(1, 2, 3), Vector3(4, 5, 6)]

    def test_state_key_layout(self):
        """Six integers per body, in order."""
        system = [Body(Vector3(1, 2, 3), Vector3(4, 5, 6)), Body(Vector3(-1, -2, -3))]
        assert state_key(system) == (1, 2, 3, 4, 5, 6, -1, -2, -3, 0, 0, 0)

    def test_state_key_depends_on_order(self):
        """Reordering bodies changes the key."""
        a, b = Body.at(1, 0, 0), Body.at(2, 0, 0)
        assert state_key([a, b]) != state_key([b, a])

    def test_state_key_equal_for_equal_systems(self):
        """Copies have equal keys."""
        system = make_system([(1, 2, 3), (4, 5, 6)])
        assert state_key(system) == state_key(copy_system(system))
