"""Tests for basic beanwire examples."""

from __future__ import annotations

import pytest


def test_ex01_quickstart(capsys: pytest.CaptureFixture[str]) -> None:
    """Quickstart shows creation args and cache hits."""
    from examples.ex01_basics.ex01_quickstart import main

    main()
    captured = capsys.readouterr()

    assert captured.out.splitlines() == [
        "database=db.internal:6543",
        "same_instance=True",
        "host_after_hit=db.internal",
    ]


def test_ex02_errors(capsys: pytest.CaptureFixture[str]) -> None:
    """Errors example walks through every failure kind."""
    from examples.ex01_basics.ex02_errors import main

    main()
    captured = capsys.readouterr()

    assert captured.out.splitlines() == [
        "not_found=cache",
        "cause=TypeError",
        "resolved=Cache",
        "mismatch=Cache!=str",
    ]


def test_ex03_pydantic_settings_defaults(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Settings bean falls back to field defaults plus definition overrides."""
    pytest.importorskip("pydantic_settings")
    from examples.ex01_basics.ex03_pydantic_settings import main

    monkeypatch.delenv("EXAMPLE_APP_NAME", raising=False)
    main()
    captured = capsys.readouterr()

    assert captured.out.strip() == "name=demo debug=True"


def test_ex03_pydantic_settings_environment(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Settings bean picks up values from the environment."""
    pytest.importorskip("pydantic_settings")
    from examples.ex01_basics.ex03_pydantic_settings import main

    monkeypatch.setenv("EXAMPLE_APP_NAME", "orders")
    main()
    captured = capsys.readouterr()

    assert captured.out.strip() == "name=orders debug=True"
