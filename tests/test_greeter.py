import io

from innex.greeter import greet, main


def test_greet_message():
    assert greet("World") == "Hello, World! You've been greeted from Python!"


def test_greet_includes_name():
    message = greet("Ada Lovelace")
    assert message.startswith("Hello, Ada Lovelace!")


def test_main_with_argument(capsys):
    assert main(["Alice"]) == 0
    assert capsys.readouterr().out == greet("Alice") + "\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Bob\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == greet("Bob") + "\n"


def test_main_empty_name_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_empty_argument_prints_nothing(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == ""