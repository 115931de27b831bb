from csrf_tokens import selftest


def test_selftest_passes(capsys):
    selftest.main()
    assert "OK" in capsys.readouterr().out
