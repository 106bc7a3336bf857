# -*- encoding: utf-8 -*-

import hashlib
import os

import pytest

from imgdelegate.delegate_exception import DelegateException
from imgdelegate.script import DelegateScript, locate_script


def _script_returning(value):
    return (
        'class CustomDelegate(object):\n'
        '    def source(self):\n'
        '        return %r\n' % (value,)
    )


class TestLocateScript(object):

    def test_absolute_path_is_unchanged(self):
        assert locate_script('/etc/imgdelegate/delegates.py') == '/etc/imgdelegate/delegates.py'

    def test_file_name_is_found_in_search_dir(self, tmpdir):
        tmpdir.join('my_delegates.py').write('')
        actual = locate_script('my_delegates.py', [str(tmpdir)])
        assert actual == os.path.join(str(tmpdir), 'my_delegates.py')

    def test_current_directory_is_searched_first(self, tmpdir, monkeypatch):
        cwd = tmpdir.mkdir('cwd')
        other = tmpdir.mkdir('other')
        cwd.join('my_delegates.py').write('')
        other.join('my_delegates.py').write('')
        monkeypatch.chdir(str(cwd))
        actual = locate_script('my_delegates.py', [str(other)])
        assert actual == os.path.join(os.getcwd(), 'my_delegates.py')

    def test_unfound_file_name_is_relative_to_current_directory(self, tmpdir, monkeypatch):
        monkeypatch.chdir(str(tmpdir))
        actual = locate_script('nowhere.py', [str(tmpdir.join('nope'))])
        assert actual == os.path.join(os.getcwd(), 'nowhere.py')


class TestDelegateScript(object):

    def test_load_and_instantiate(self):
        script = DelegateScript()
        script.load(_script_returning('cats'))
        assert script.is_loaded
        assert script.instantiate().source() == 'cats'

    def test_each_instantiation_is_a_new_object(self):
        script = DelegateScript()
        script.load(_script_returning('cats'))
        assert script.instantiate() is not script.instantiate()

    def test_instantiate_before_load_is_error(self):
        script = DelegateScript()
        assert not script.is_loaded
        with pytest.raises(DelegateException):
            script.instantiate()

    @pytest.mark.parametrize('code', [
        'class CustomDelegate(object:\n',
        'raise ValueError("nope")\n',
        'class SomethingElse(object):\n    pass\n',
        'CustomDelegate = 5\n',
    ])
    def test_bad_code_is_error(self, code):
        script = DelegateScript()
        with pytest.raises(DelegateException):
            script.load(code)

    def test_bad_code_keeps_previous_code(self):
        script = DelegateScript()
        script.load(_script_returning('cats'))
        with pytest.raises(DelegateException):
            script.load('this is not python')
        assert script.instantiate().source() == 'cats'

    def test_instances_keep_the_code_they_were_created_with(self):
        script = DelegateScript()
        script.load(_script_returning('cats'))
        before = script.instantiate()
        script.load(_script_returning('dogs'))
        assert before.source() == 'cats'
        assert script.instantiate().source() == 'dogs'

    def test_load_file_records_checksum(self, tmpdir):
        code = _script_returning('cats')
        fp = tmpdir.join('delegates.py')
        fp.write(code)
        script = DelegateScript(str(fp))
        script.load_file()
        assert script.checksum == hashlib.sha1(code.encode('utf8')).hexdigest()
        assert script.instantiate().source() == 'cats'

    def test_load_missing_file_is_ioerror(self, tmpdir):
        script = DelegateScript(str(tmpdir.join('missing.py')))
        with pytest.raises(IOError):
            script.load_file()

    def test_reload_if_changed(self, tmpdir):
        fp = tmpdir.join('delegates.py')
        fp.write(_script_returning('cats'))
        script = DelegateScript(str(fp))
        script.load_file()

        assert script.reload_if_changed() is False

        fp.write(_script_returning('dogs'))
        assert script.reload_if_changed() is True
        assert script.instantiate().source() == 'dogs'
        assert script.reload_if_changed() is False

    def test_broken_change_is_only_reported_once(self, tmpdir):
        fp = tmpdir.join('delegates.py')
        fp.write(_script_returning('cats'))
        script = DelegateScript(str(fp))
        script.load_file()

        fp.write('this is not python')
        with pytest.raises(DelegateException):
            script.reload_if_changed()
        assert script.reload_if_changed() is False
        assert script.instantiate().source() == 'cats'

    def test_load_accepts_utf8_bytes(self):
        script = DelegateScript()
        script.load(_script_returning(u'caf\xe9').encode('utf8'))
        assert script.instantiate().source() == u'caf\xe9'

    def test_load_file_that_is_not_utf8_is_error(self, tmpdir):
        fp = tmpdir.join('delegates.py')
        fp.write_binary(b'\xff\xfe\x00not python')
        script = DelegateScript(str(fp))
        with pytest.raises(DelegateException):
            script.load_file()
        assert not script.is_loaded

    def test_error_in_constructor_is_wrapped(self):
        script = DelegateScript()
        script.load(
            'class CustomDelegate(object):\n'
            '    def __init__(self):\n'
            '        raise RuntimeError("no delegate for you")\n'
        )
        with pytest.raises(DelegateException) as err:
            script.instantiate()
        assert isinstance(err.value.__cause__, RuntimeError)
