import pytest

from kernelkit.arrays import (
    SEPARATOR,
    block_sums,
    check,
    format_matrix,
    init_matrix,
    main,
    matrix_add,
    vector_add,
)


def test_vector_add_elementwise():
    first = [1.0, 2.0, 3.0]
    second = [0.5, -2.0, 10.0]
    result = vector_add(first, second)
    assert len(result) == 3
    assert [r - b for r, b in zip(result, second)] == pytest.approx(first)


def test_vector_add_commutes():
    first = [1.5, 2.25, -3.0]
    second = [4.0, 0.0, 7.5]
    assert vector_add(first, second) == vector_add(second, first)


def test_vector_add_length_mismatch():
    with pytest.raises(ValueError):
        vector_add([1.0, 2.0], [1.0])


def test_init_matrix_is_all_ones():
    matrix = init_matrix(3, 4)
    assert len(matrix) == 12
    assert set(matrix) == {1.0}


def test_init_matrix_rejects_negative():
    with pytest.raises(ValueError):
        init_matrix(-1, 4)


def test_matrix_add_of_ones():
    nx, ny = 4, 5
    result = matrix_add(init_matrix(nx, ny), init_matrix(nx, ny))
    assert result == [2.0] * (nx * ny)


def test_matrix_add_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_add(init_matrix(2, 2), init_matrix(2, 3))


def test_format_matrix_layout():
    text = format_matrix([1.0, 2.0, 3.0, 4.0], 2, 2)
    lines = text.splitlines()
    assert lines == [SEPARATOR, "1 2 ", SEPARATOR, SEPARATOR, "3 4 ", SEPARATOR]
    assert text.endswith("\n")


def test_format_matrix_wrong_size():
    with pytest.raises(ValueError):
        format_matrix([1.0, 2.0, 3.0], 2, 2)


def test_block_sums_of_ones():
    assert block_sums([1.0] * 1024, 256) == [256.0] * 4


def test_block_sums_partial_last_block():
    values = [1.0] * 10
    sums = block_sums(values, 4)
    assert len(sums) == 3
    assert sum(sums) == sum(values)
    assert sums[-1] == 2.0


def test_block_sums_empty():
    assert block_sums([], 8) == []


@pytest.mark.parametrize("size", [0, -3])
def test_block_sums_rejects_bad_block_size(size):
    with pytest.raises(ValueError):
        block_sums([1.0, 2.0], size)


def test_check_identical():
    values = [1.0, 2.0, 3.0]
    assert check(values, list(values)) is True


def test_check_detects_shortfall():
    assert check([1.0, 2.0], [1.0, 1.9]) is False


def test_check_is_one_sided():
    assert check([1.0, 2.0], [1.0, 5.0]) is True


def test_check_custom_tolerance():
    assert check([1.0], [0.9], tolerance=0.2) is True
    assert check([1.0], [0.9], tolerance=0.05) is False


def test_check_length_mismatch():
    with pytest.raises(ValueError):
        check([1.0, 2.0], [1.0])


def test_main_reduce(capsys):
    assert main(["reduce", "--size", "1000", "--block-size", "256"]) == 0
    assert capsys.readouterr().out.strip() == "Reduction result is correct!"


def test_main_matrix(capsys):
    assert main(["matrix", "--nx", "2", "--ny", "3"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[:2] == ["Matrix initialized", "Matrix initialized"]
    assert out.endswith(format_matrix([2.0] * 6, 2, 3))


def test_main_rejects_bad_block_size():
    with pytest.raises(SystemExit):
        main(["reduce", "--size", "10", "--block-size", "0"])