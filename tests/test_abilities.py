import pytest

from navalgrid.abilities import cone, cross, octahedron, render_pattern


@pytest.mark.parametrize("factory", [cone, cross, octahedron])
def test_default_patterns_are_five_by_five_binary(factory):
    pattern = factory()
    assert len(pattern) == 5
    assert all(len(line) == 5 for line in pattern)
    assert {v for line in pattern for v in line} <= {0, 1}


def test_cone_shape():
    pattern = cone()
    assert pattern[0] == [0] * 5
    assert pattern[1] == [0] * 5
    assert pattern[2] == [0, 0, 1, 0, 0]
    assert pattern[4] == [1] * 5
    # each row of the cone is symmetric and widens downwards
    widths = [sum(line) for line in pattern]
    assert widths == sorted(widths)
    assert all(line == line[::-1] for line in pattern)


def test_cross_shape():
    pattern = cross()
    assert pattern[2] == [1] * 5
    assert [line[2] for line in pattern] == [1] * 5
    assert pattern[0][0] == 0 and pattern[4][4] == 0


def test_octahedron_symmetric_and_contains_cross():
    diamond = octahedron()
    transposed = [list(col) for col in zip(*diamond)]
    assert diamond == transposed
    assert diamond == diamond[::-1]
    plus = cross()
    assert all(
        d >= p for d_line, p_line in zip(diamond, plus) for d, p in zip(d_line, p_line)
    )
    assert diamond[0][0] == 0


def test_invalid_size():
    with pytest.raises(ValueError):
        cross(0)


def test_render_pattern():
    text = render_pattern(cross())
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0] == "0 0 1 0 0 "
    assert lines[2] == "1 " * 5
    assert text.endswith("\n")