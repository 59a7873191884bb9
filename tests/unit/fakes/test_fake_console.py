"""Unit tests for FakeConsole."""

from zsh_setup.gateway.console.fake import FakeConsole


def test_records_messages_by_severity() -> None:
    console = FakeConsole()

    console.info("checking")
    console.warning("careful")
    console.error("broken")
    console.echo("plain")

    assert console.messages == [("info", "checking"), ("warning", "careful"), ("error", "broken")]
    assert console.warnings == ["careful"]
    assert console.errors == ["broken"]
    assert console.lines == ["plain"]
    assert "[WARNING] careful" in console.output


def test_confirm_uses_responses_then_default() -> None:
    console = FakeConsole(confirm_responses=[True])

    assert console.confirm("first?", default=False) is True
    assert console.confirm("second?", default=False) is False
    assert console.confirm("third?", default=True) is True
    assert console.prompts == ["first?", "second?", "third?"]
