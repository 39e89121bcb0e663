
import pytest

from globtool import __version__
from globtool.run import main
from globtool.xglob import translate


def run(capsys, *args):
    main(list(args))
    return capsys.readouterr().out


def test_regex(capsys):
    assert run(capsys, 'regex', '*.js') == translate('*.js') + '\n'
    assert run(capsys, '--set', 'platform=windows', 'regex', '*.js') == '^[^\\\\/]*\\.js(?:\\\\|/)*$\n'


def test_match(capsys):
    assert run(capsys, 'match', '*.{js,ts}', 'a.js', 'b.py', 'c.ts') == 'a.js\nc.ts\n'
    with pytest.raises(SystemExit) as e:
        main(['match', '*.js', 'b.py'])
    assert e.value.code == 1


def test_isglob(capsys):
    assert run(capsys, 'isglob', 'a/*.txt') == 'true\n'
    assert run(capsys, 'isglob', 'plain/path') == 'false\n'


def test_normalize(capsys):
    assert run(capsys, 'normalize', 'a/**/../b') == 'a/**/../b\n'
    assert run(capsys, '--set', 'globstar=no', 'normalize', 'a/**/../b') == 'a/b\n'


def test_join(capsys):
    assert run(capsys, 'join', 'a', '**', '..', 'b') == 'a/**/../b\n'
    assert run(capsys, 'join', 'a', 'x', '..', 'b') == 'a/b\n'


def test_config_file(capsys, tmp_path):
    fn = tmp_path / 'glob.ini'
    fn.write_text('[globtool]\nglobstar = no\n')
    assert run(capsys, '--config', str(fn), 'join', 'a', '**', '..', 'b') == 'a/b\n'


def test_version(capsys):
    with pytest.raises(SystemExit) as e:
        main(['-V'])
    assert e.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_usage_errors():
    with pytest.raises(SystemExit) as e:
        main(['isglob'])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main(['nosuch'])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main(['normalize', 'a\0b'])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main(['--set', 'platform=vms', 'regex', 'x'])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main([])
    assert e.value.code == 2
