import io

import pytest

from globre.cli.main import main


def run(argv, capsys):
    main(argv)
    return capsys.readouterr().out


def test_convert(capsys):
    assert run(['convert', '*.foo.com'], capsys) == '^.*\\.foo\\.com\\Z\n'


def test_convert_alias_with_separators(capsys):
    assert run(['c', '-s', '/', '/foo/*/baz'], capsys) == '^/foo/[^/]*/baz\\Z\n'


def test_convert_lenient(capsys):
    assert run(['convert', '--lenient', 'a]'], capsys) == '^a]\\Z\n'


def test_convert_syntax_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['convert', 'a]'])
    assert excinfo.value.code == 1
    assert 'Error: unexpected close bracket' in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0
    assert 'usage: globre' in capsys.readouterr().out


@pytest.fixture
def candidates_file(tmp_path):
    path = tmp_path / 'candidates.txt'
    path.write_text('/foo/bar/baz\n/foo/bar/bar/baz\n\n/foo/x/baz\n')
    return path


def test_filter_from_file(capsys, candidates_file):
    out = run(['filter', '-s', '/', '-T', str(candidates_file), '/foo/*/baz'], capsys)
    assert out == '/foo/bar/baz\n/foo/x/baz\n'


def test_filter_invert(capsys, candidates_file):
    out = run(['f', '-s', '/', '--invert', '-T', str(candidates_file), '/foo/*/baz'], capsys)
    assert out == '/foo/bar/bar/baz\n'


def test_filter_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('a.TXT\nb.md\n'))
    assert run(['filter', '-i', '*.txt'], capsys) == 'a.TXT\n'


def test_filter_null_separated(capsys, tmp_path):
    path = tmp_path / 'candidates.bin'
    path.write_bytes(b'a b.py\x00c.txt\x00d.py')
    out = run(['filter', '-0', '-T', str(path), '*.py'], capsys)
    assert out == 'a b.py\0d.py\0'


def test_filter_compile_error(capsys, candidates_file):
    with pytest.raises(SystemExit) as excinfo:
        main(['filter', '-T', str(candidates_file), '{).foo.com'])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith('Error: ')


def test_filter_missing_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(['filter', '-T', str(tmp_path / 'nope.txt'), '*'])
    assert excinfo.value.code == 1


def test_filter_skips_empty_items(capsys, tmp_path):
    path = tmp_path / 'candidates.bin'
    path.write_bytes(b'a\x00\x00b\x00')
    assert run(['filter', '-0', '-T', str(path), '*'], capsys) == 'a\0b\0'

    path = tmp_path / 'candidates.txt'
    path.write_text('a\n\nb\n')
    assert run(['filter', '-T', str(path), '*'], capsys) == 'a\nb\n'
