"""Tests for the generate command."""

import json

from adgen.urls.models import DEFAULT_TAG


DEMO_PREFIX = (
    f"https://ads.eskimi.com/getad/?tag={DEFAULT_TAG}&w=300&h=250&audit=1"
    "&domain=demo.eskimi.com&page=https%3A%2F%2Fdemo.eskimi.com%2Fpublisher%2F"
)


def test_generate_defaults(invoke):
    result = invoke("generate", catch_exceptions=False)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [DEMO_PREFIX]


def test_generate_one_url_per_placement(invoke):
    result = invoke("generate", "-w", "300", "-H", "250", "-n", "3")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert len(set(lines)) == 1


def test_generate_overrides_in_order(invoke):
    result = invoke(
        "generate", "-p", "bidfloor=0.5", "-p", "ua=Mozilla/5.0 (X11)", "-p", "gdpr"
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == (
        DEMO_PREFIX + "&bidfloor=0.5&ua=Mozilla%2F5.0+%28X11%29&gdpr="
    )


def test_generate_reports_every_invalid_field(invoke):
    result = invoke("generate", "-w", "abc", "-H", "2.5", "-n", "0")

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "placement_count: must be at least 1" in result.output
    assert "width: must be a number" in result.output
    assert "height: must be a whole number" in result.output


def test_generate_too_many_placements(invoke):
    result = invoke("generate", "-n", "21")

    assert result.exit_code == 1
    assert "placement_count: must be at most 20" in result.output


def test_generate_page_option(invoke):
    result = invoke("generate", "--page", "https://news.example/a b")

    assert result.exit_code == 0
    assert "&page=https%3A%2F%2Fnews.example%2Fa+b" in result.stdout


def test_generate_uses_config_defaults(invoke, clean_environment):
    (clean_environment / "work" / "adgen.yaml").write_text(
        "defaults:\n  width: 320\n  height: 50\n  placement_count: 2\n"
        "endpoint:\n  domain: staging.example\n"
    )

    result = invoke("generate")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    assert "&w=320&h=50&" in lines[0]
    assert "&domain=staging.example&" in lines[0]


def test_generate_json(invoke):
    result = invoke("generate", "-n", "2", "-w", "728", "-H", "90", "--format", "json")

    assert result.exit_code == 0
    placements = json.loads(result.stdout)
    assert len(placements) == 2
    assert placements[0]["width"] == 728
    assert placements[0]["height"] == 90
    assert placements[0]["url"].startswith("https://ads.eskimi.com/getad/?")


def test_generate_table(invoke):
    result = invoke("generate", "-n", "2", "--format", "table")

    assert result.exit_code == 0
    assert "2 placement(s)" in result.stdout
    assert "300x250" in result.stdout


def test_generate_unknown_preset(invoke):
    result = invoke("generate", "--preset", "nope")

    assert result.exit_code == 1
    assert "Preset not found: nope" in result.output
