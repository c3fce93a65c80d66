import io
from collections import Counter

from sampler.dup import count_file_text, count_lines, dedup, duplicates, main


def test_count_lines_totals_match_input():
    lines = ["alpha", "beta", "alpha", "gamma", "beta", "alpha"]
    counts = count_lines(io.StringIO("\n".join(lines) + "\n"))
    assert sum(counts.values()) == len(lines)
    assert set(counts) == set(lines)


def test_count_lines_strips_carriage_returns():
    counts = count_lines(io.StringIO("a\r\nb\r\na"))
    assert set(counts) == {"a", "b"}


def test_count_lines_accumulates():
    text = "p\nq\np\n"
    once = count_lines(io.StringIO(text))
    twice = count_lines(io.StringIO(text), count_lines(io.StringIO(text)))
    assert twice == once + once


def test_count_file_text_keeps_trailing_empty_piece():
    text = "x\ny\nx\n"
    counts = count_file_text(text)
    assert "" in counts
    assert sum(counts.values()) == text.count("\n") + 1


def test_duplicates_only_repeated():
    counts = Counter({"x": 3, "y": 1, "z": 2})
    assert list(duplicates(counts)) == [(3, "x"), (2, "z")]


def test_dedup_keeps_first_occurrence_order():
    assert list(dedup(["b", "a", "b", "c", "a"])) == ["b", "a", "c"]


def test_main_counts_across_files(tmp_path, capsys):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("x\ny\nx\n", encoding="utf-8")
    second.write_text("y\nz\n", encoding="utf-8")
    assert main([str(first), str(second)]) == 0
    out_lines = capsys.readouterr().out.splitlines()
    assert {line.split("\t")[1] for line in out_lines} == {"x", "y"}
    assert "2\tx" in out_lines


def test_main_reports_missing_file_and_continues(tmp_path, capsys):
    present = tmp_path / "present.txt"
    present.write_text("k\nk\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"
    main([str(missing), str(present)])
    captured = capsys.readouterr()
    assert str(missing) in captured.err
    assert captured.err.startswith("dup")
    assert [line.split("\t")[1] for line in captured.out.splitlines()] == ["k"]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("m\nn\nm\n"))
    main([])
    assert [line.split("\t")[1] for line in capsys.readouterr().out.splitlines()] == ["m"]


def test_main_unique(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("b\na\nb\nc\n"))
    main(["--unique"])
    assert capsys.readouterr().out.splitlines() == ["b", "a", "c"]


def test_main_whole_counts_empty_trailing_pieces(tmp_path, capsys):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("w\n", encoding="utf-8")
    second.write_text("w\n", encoding="utf-8")
    main(["--whole", str(first), str(second)])
    names = {line.split("\t")[1] for line in capsys.readouterr().out.splitlines()}
    assert names == {"w", ""}