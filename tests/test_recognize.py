import io
import json
import sys

import pytest

from fa.recognize import main, write_result

def test_files(tmp_path) -> None:
    input_path = tmp_path / 'input.txt'
    output_path = tmp_path / 'output.jsonl'
    input_path.write_text('1\n11\n0\ne\n0100\n')
    main([
        '--language', 'parity',
        '--input', str(input_path),
        '--output', str(output_path)
    ])
    with output_path.open() as fin:
        results = [json.loads(line) for line in fin]
    assert results == [
        { 'input' : '1', 'accepted' : True },
        { 'input' : '11', 'accepted' : False },
        { 'input' : '0', 'accepted' : False },
        { 'input' : 'e', 'accepted' : False },
        { 'input' : '0100', 'accepted' : True }
    ]

def test_stdin_with_swap(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, 'stdin', io.StringIO('1\n01\n10\n'))
    main(['--language', 'first', '--swap', '0', '1', '--print-automaton'])
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)['accepted'] for line in lines] == [False, True, False]

@pytest.mark.parametrize('argv', [
    ['--language', 'no-such-language'],
    ['--language', 'parity', '--swap', '0', '2'],
    []
])
def test_invalid_arguments(argv) -> None:
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2

def test_write_result() -> None:
    fout = io.StringIO()
    write_result('01', True, fout)
    write_result('e', False, fout)
    assert fout.getvalue() == (
        '{"input":"01","accepted":true}\n'
        '{"input":"e","accepted":false}\n'
    )
