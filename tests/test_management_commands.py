"""CLI command tests."""


def test_convert_command(runner):
    result = runner.invoke(args=["convert", "1", "kilogram", "pound", "-q", "mass"])

    assert result.exit_code == 0
    assert result.output.strip() == "1 kilogram = 2.204624 pound"


def test_convert_command_temperature(runner):
    result = runner.invoke(args=["convert", "100", "celsius", "fahrenheit", "--quantity", "temperature"])

    assert result.exit_code == 0
    assert result.output.strip() == "100 celsius = 212 fahrenheit"


def test_convert_command_rejects_unknown_unit(runner):
    result = runner.invoke(args=["convert", "1", "kilogram", "furlong", "-q", "mass"])

    assert result.exit_code == 2
    assert "'furlong' is not a mass unit" in result.output


def test_convert_command_rejects_unknown_quantity(runner):
    result = runner.invoke(args=["convert", "1", "a", "b", "-q", "energy"])

    assert result.exit_code == 2


def test_calculators_command_lists_catalog(runner):
    result = runner.invoke(args=["calculators"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Finance & Investment:"
    assert any(line.startswith("  /tip-calculator") and line.endswith("Tip Calculator") for line in lines)
    assert "Conversions:" in lines


def test_sitemap_command_uses_configured_base_url(runner):
    result = runner.invoke(args=["sitemap"])

    assert result.exit_code == 0
    assert result.output.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<loc>https://www.allwayscalc.com/tip-calculator</loc>" in result.output


def test_sitemap_command_base_url_override(runner):
    result = runner.invoke(args=["sitemap", "--base-url", "https://staging.example.com/"])

    assert result.exit_code == 0
    assert "<loc>https://staging.example.com/faq</loc>" in result.output
    assert "www.allwayscalc.com" not in result.output
