import pytest

from run import main


def _run(capsys, *argv):
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))

    return exc_info.value.code, capsys.readouterr().out.strip()


def test_context_prints_default_context(capsys):
    code, out = _run(capsys, "context")

    assert code == 0
    assert out == "DecimalAmount(precision=16, rounding=HALF_EVEN)"


def test_context_follows_configuration(monkeypatch, capsys):
    monkeypatch.setenv("MONEY_DEFAULTS_MATH_CONTEXT", "DECIMAL128")

    code, out = _run(capsys, "context")

    assert code == 0
    assert out == "DecimalAmount(precision=34, rounding=HALF_EVEN)"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (("USD 10", "divide", "3"), "USD 3.333333333333333"),
        (("USD 1.5", "add", "USD 2"), "USD 3.5"),
        (("USD 7", "divide-and-remainder", "2"), "USD 3 USD 1"),
        (("EUR 1.23", "scale-by-power-of-ten", "2"), "EUR 123"),
        (("EUR 1.2300", "strip-trailing-zeros"), "EUR 1.23"),
        (("GBP -4", "abs"), "GBP 4"),
    ],
)
def test_calc(capsys, argv, expected):
    code, out = _run(capsys, "calc", *argv)

    assert code == 0
    assert out == expected


@pytest.mark.parametrize(
    "argv",
    [
        ("USD 10", "add"),
        ("USD 1", "add", "EUR 1"),
        ("USD 1", "divide", "0"),
        ("USD 1", "multiply", "two"),
        ("10", "negate"),
    ],
)
def test_calc_failures_exit_with_error(capsys, argv):
    code, out = _run(capsys, "calc", *argv)

    assert code == 1
    assert out == ""


def test_unknown_operation_is_rejected_by_parser(capsys):
    code, _ = _run(capsys, "calc", "USD 1", "sqrt")

    assert code == 2
