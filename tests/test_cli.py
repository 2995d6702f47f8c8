from purgatory.cli import main


def test_main_prints_triplet_result(capsys):
    status = main([])
    assert status == 0
    assert capsys.readouterr().out == "1\n"