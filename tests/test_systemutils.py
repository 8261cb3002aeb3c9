import os
from pathlib import Path

import pytest

from levelpipe.systemutils import (
    DirectoryCreationError,
    create_directory,
    get_current_working_directory,
    read_env,
    replace_env_variables_in_path,
    split_string,
)


def test_can_read_existing_env_variable(monkeypatch):
    name = "systemUtils_canReadExistingEnvVariable"
    monkeypatch.setenv(name, "hallo")
    assert read_env(name) == "hallo"


def test_read_env_returns_none_if_variable_does_not_exist(monkeypatch):
    name = "nonExistingEnvVar_readEnvReturnsEmptyOptionalIfVariableDoesNotExists"
    monkeypatch.delenv(name, raising=False)
    assert read_env(name) is None


def test_get_current_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    result = get_current_working_directory()
    assert result == os.getcwd()
    assert Path(result).samefile(tmp_path)


def test_split_string_can_split_a_path_01():
    assert len(split_string("this/is/a/path", "/")) == 4


def test_split_string_can_split_a_path_02():
    result = split_string("/this/is/a/path", "/")
    assert len(result) == 4
    assert result[0] == "this"


def test_split_string_can_split_a_path_03():
    result = split_string("this/is/a/path/", "/")
    assert len(result) == 4
    assert result[3] == "path"


def test_split_string_can_split_a_path_04():
    assert split_string("hello", "/") == ["hello"]


def test_split_string_can_use_long_separators():
    result = split_string("###this###is###a###path###", "###")
    assert len(result) == 4
    assert result[3] == "path"


def test_split_string_keeps_empty_inner_sections():
    assert split_string("a//b", "/") == ["a", "", "b"]


def test_split_string_rejects_empty_separator():
    with pytest.raises(ValueError):
        split_string("abc", "")


def test_replace_env_vars_in_path_works_with_just_an_env_var(monkeypatch):
    name = "systemUtils_replaceEnvVarsInPathWorksWithJustAnEnvVar"
    monkeypatch.setenv(name, "hallo")
    assert replace_env_variables_in_path("$" + name) == "hallo"


def test_does_not_touch_not_existing_env_vars(monkeypatch):
    monkeypatch.delenv("nonExistingEnvVar_systemUtils", raising=False)
    assert (
        replace_env_variables_in_path("$nonExistingEnvVar_systemUtils")
        == "$nonExistingEnvVar_systemUtils"
    )


def test_replace_env_vars_in_path_works(monkeypatch):
    name = "systemUtils_replaceEnvVarsInPathWorks"
    monkeypatch.setenv(name, "hallo")
    assert replace_env_variables_in_path("/start/$" + name + "/end") == "start/hallo/end"


def test_can_create_directory(tmp_path):
    directory = tmp_path / "staticFileFunctions_test" / "this/is/a/test/directory"
    assert not directory.exists()
    result = create_directory(str(directory))
    assert result == directory
    assert directory.is_dir()


def test_create_directory_succeeds_if_directory_already_exists(tmp_path):
    directory = tmp_path / "staticFileFunctions_test" / "this/is/a/test/directory"
    create_directory(directory)
    result = create_directory(directory)
    assert result == directory
    assert directory.is_dir()


def test_create_directory_raises_if_directory_can_not_be_created(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    directory = blocker / "this/is/a/test/directory"
    with pytest.raises(
        DirectoryCreationError, match="success: false - exception has been thrown"
    ):
        create_directory(directory)
    assert not directory.exists()