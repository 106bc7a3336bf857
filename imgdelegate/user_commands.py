#!/usr/bin/env python
import os
import shutil
from configobj import ConfigObj

from imgdelegate.config import data_directory_path, default_config_file_path
from imgdelegate.script import locate_script


SCRIPT_FILE_NAME = 'delegates.py'


def _sample_script_path():
    return os.path.join(data_directory_path(), SCRIPT_FILE_NAME)


def _read_text(fp):
    with open(fp, 'rb') as f:
        return f.read().decode('utf8')


def _copy_sample_script(config):
    delegate_config = config['delegate']
    script_target = locate_script(
        delegate_config['script_pathname'],
        delegate_config.get('script_search_dirs', [])
    )
    if os.path.exists(script_target):
        return
    os.makedirs(os.path.dirname(script_target), exist_ok=True)
    shutil.copyfile(_sample_script_path(), script_target)


def _make_directories(config):
    log_dir = config['logging']['log_dir']
    os.makedirs(log_dir, exist_ok=True)


def display_default_config_file():
    print(_read_text(default_config_file_path()))


def display_sample_script():
    print(_read_text(_sample_script_path()))


def create_default_files_and_directories(config=None):
    if not config:
        config = ConfigObj(default_config_file_path(), unrepr=True, interpolation=False)
    _make_directories(config)
    _copy_sample_script(config)
