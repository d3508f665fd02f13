"""Tests for the params commands."""


def test_params_list_all_groups(invoke):
    result = invoke("params", "list")

    assert result.exit_code == 0
    assert "bidfloor" in result.output
    assert "devicetype" in result.output
    assert "gdpr_consent" in result.output


def test_params_list_group(invoke):
    result = invoke("params", "list", "--group", "geo")

    assert result.exit_code == 0
    assert "country" in result.output
    assert "bidfloor" not in result.output


def test_params_list_unknown_group(invoke):
    result = invoke("params", "list", "-g", "nope")

    assert result.exit_code == 1
    assert "Unknown group 'nope'" in result.output


def test_params_list_search(invoke):
    result = invoke("params", "list", "--search", "FLOOR")

    assert result.exit_code == 0
    assert "bidfloor" in result.output
    assert "country" not in result.output


def test_params_list_search_no_match(invoke):
    result = invoke("params", "list", "-s", "zzz-not-documented")

    assert result.exit_code == 0
    assert "No parameters found." in result.output


def test_params_show(invoke):
    result = invoke("params", "show", "bidfloor")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "bidfloor [imp]",
        "  Minimum bid for this impression expressed in CPM",
        "  Example: 0.5",
        "  Default: 0.01",
    ]


def test_params_show_undocumented_key(invoke):
    result = invoke("params", "show", "my_custom_flag")

    assert result.exit_code == 0
    assert "my_custom_flag: no description available" in result.output
