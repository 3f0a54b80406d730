import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.errors import OutputError
from reporting.outputter import Outputter

TEST_FILE_NAME = 'test.txt'
TEST_DATA = {'information': 'test'}

@pytest.fixture
def outputter(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return Outputter(TEST_FILE_NAME)

def test_default_output_file():
    assert Outputter().default_output_file == 'complexity.json'
    assert Outputter(TEST_FILE_NAME).default_output_file == TEST_FILE_NAME

def test_write_file(outputter, tmp_path):
    outputter.write_file('test information', TEST_FILE_NAME)
    assert (tmp_path / TEST_FILE_NAME).read_text(encoding='utf-8') == 'test information'

def test_write_file_creates_directories(outputter, tmp_path):
    path = outputter.write_file('test information', tmp_path / 'reports' / 'out.txt')
    assert path.read_text(encoding='utf-8') == 'test information'

@pytest.mark.parametrize('data, file_name', [
    (None, TEST_FILE_NAME),
    ('test information', None),
    (None, None),
])
def test_write_file_requires_data_and_file_name(outputter, data, file_name):
    with pytest.raises(OutputError, match='No data or filename provided'):
        outputter.write_file(data, file_name)

def test_write_data(outputter, tmp_path):
    outputter.write_data(TEST_DATA, TEST_FILE_NAME)
    contents = (tmp_path / TEST_FILE_NAME).read_text(encoding='utf-8')
    assert contents == json.dumps(TEST_DATA, indent=2)

def test_write_data_with_custom_name(outputter, tmp_path):
    path = outputter.write_data(TEST_DATA, 'custom')
    assert path.name == 'custom.test.txt'
    assert json.loads((tmp_path / 'custom.test.txt').read_text(encoding='utf-8')) == TEST_DATA

def test_write_data_to_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Outputter().write_data(TEST_DATA)
    assert json.loads((tmp_path / 'complexity.json').read_text(encoding='utf-8')) == TEST_DATA
