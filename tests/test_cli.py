from pipeflow.cli import main


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "[Pipex] Error: invalid nb of arguments\n"


def test_too_few_commands(capsys):
    assert main(["infile", "cat", "outfile"]) == 1
    assert "invalid nb of arguments" in capsys.readouterr().err


def test_here_doc_needs_more_arguments(capsys):
    assert main(["here_doc", "END", "cat", "outfile"]) == 1
    assert "invalid nb of arguments" in capsys.readouterr().err


def test_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("abc\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_text() == "ABC\n"


def test_returns_status_of_last_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("abc\n")
    status = main([str(infile), "cat", "nosuchcmd_zz", str(tmp_path / "out")])
    assert status == 127
    assert "command not found -> nosuchcmd_zz" in capsys.readouterr().err