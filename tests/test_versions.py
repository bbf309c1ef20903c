import pytest

from numcraft.versions import main, sort_versions, version_key


def test_single_component_key():
    assert version_key("1") == 1 << 56


def test_key_orders_numerically():
    assert version_key("1.2") < version_key("1.10")
    assert version_key("1.9") < version_key("1.10")
    assert version_key("2") > version_key("1.255.255")


def test_trailing_zero_components_equal():
    assert version_key("1.0") == version_key("1")
    assert version_key("1.2.0.0") == version_key("1.2")


def test_sort_versions():
    assert sort_versions(["1.10", "1.2", "1.9", "0.5"]) == ["0.5", "1.2", "1.9", "1.10"]


def test_eight_components_allowed():
    assert version_key("1.2.3.4.5.6.7.8") & 0xFF == 8


@pytest.mark.parametrize("bad", ["1.a", "256", "1.2.3.4.5.6.7.8.9", "v1"])
def test_invalid_versions(bad):
    with pytest.raises(ValueError):
        version_key(bad)


def test_main_sorts_file(tmp_path):
    src = tmp_path / "version.txt"
    dst = tmp_path / "sorted_version.txt"
    src.write_text("1.10 1.2\n1.9\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == "1.2\n1.9\n1.10\n"


def test_main_missing_input_writes_empty(tmp_path):
    dst = tmp_path / "out.txt"
    main([str(tmp_path / "missing.txt"), str(dst)])
    assert dst.read_text() == ""