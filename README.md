# levelpipe

Building blocks for applications that read a JSON configuration, match incoming
data against named regular expression patterns, and store results in files or
SQLite. The package is a library only. It has no command-line program.

## Modules

- `levelpipe.context`: `ApplicationContext` loads a JSON configuration file with
  `load_application_config(path)`. A file that cannot be read or parsed is logged,
  and the context is then left without a configuration. From the configuration it
  takes the following:
  - `logging/logLevel`. This sets the level of the `levelpipe` logger. `TRACE` and
    `WARN` are accepted as well as the standard level names. The name is exposed as
    `log_level`.
  - The entries of `logging/loggers` that have a `type`. These are exposed as
    `logging_destinations`.

  Other members:
  - `find_recursive_in_json_tree(path, json_object)` follows a slash-separated
    path.
  - `create_objects_from_json(factory, json_object, path, *args)` and
    `create_objects_from_app_config_json(factory, path, *args)` build one object per
    JSON object found at the path. If `factory(element, *args)` raises, they call
    `factory(*args)` instead.
  - `reset()` forgets the configuration.
  - `get_application_context()` returns the process-wide instance.
- `levelpipe.directories`: `ApplicationDirectories` holds the application's root
  directory and three subdirectories:
  - `pipelines_dir`
  - `processes_dir`
  - `worker_modules_dir`

  Built without arguments, it uses the current working directory with `pipelines.d`,
  `processes.d` and `lib`. Built from a JSON object, it needs the string members
  `root`, `pipelines`, `processes` and `workerModules`. Sections of `root` written
  as `$NAME` are replaced by environment variables.
  `create_application_directories()` creates whatever is missing. It returns `True`
  if every directory exists afterwards.
- `levelpipe.matchable`: `Matchable` is a set of key → regex patterns. Methods:
  - `add_matching_pattern`, `add_matching_patterns`, `get_matching_pattern`,
    `remove_matching_pattern`, `set_matching_patterns`, `has_matching_patterns`.
  - `matches_all(other)` is true when both sides have the same non-zero number of
    patterns and every one of this side's patterns fully matches the other side's
    value for the same key.
  - `matches_all_of_mine_to_any_of_the_other(other)` is true when this side has no
    patterns, or when all of them match.
- `levelpipe.encoding`: three functions encode text or bytes as base64. Input ends
  at the first NUL byte.
  - `encode(data, max_line_length)` wraps the output into lines; a negative length
    means no wrapping.
  - `encode_with_default_new_lines(data)` uses lines of 76 characters.
  - `encode_no_new_lines(data)` produces a single line.
- `levelpipe.dbinterface`: `SQLiteDatabase` opens the file named by the `fileName`
  connection parameter. A missing parameter raises `ValueError`. It can be used as
  a context manager, which closes it. `execute_query(sql)` runs one or more
  statements. It returns a `RecordSet` of `Row`s whose values are text, with `NULL`
  values flagged.
  - `RecordSet.get_value(field, row)` returns `None` for a missing row or field.
  - `RecordSet.is_null(field, row)` returns `True` for a missing row or field.
- `levelpipe.filewriter`: `FileWriter(target_directory)` writes content through a
  temporary file to `<target>/<name>.dat`. The name is the output file name if one
  is given, otherwise the transaction id, otherwise `unnamed`. Missing content
  gives an empty file. Without a target directory, `write_file` writes nothing and
  returns `None`.
- `levelpipe.systemutils`: the lower-level helpers:
  - `read_env`
  - `get_current_working_directory`
  - `split_string`
  - `replace_env_variables_in_path`
  - `create_directory`, which raises `DirectoryCreationError` on failure.

## Examples

Base64 with and without line wrapping:

```python
from levelpipe.encoding import encode, encode_no_new_lines

encode("Hallo Welt", 76)           # 'SGFsbG8gV2VsdA=='
encode_no_new_lines("some data")   # 'c29tZSBkYXRh'
```

Pattern matching:

```python
from levelpipe.matchable import Matchable

pipeline = Matchable({"origin": "sensor/.*"})
data = Matchable({"origin": "sensor/42"})

pipeline.matches_all_of_mine_to_any_of_the_other(data)  # True
```

Application configuration and directories:

```python
from levelpipe.context import get_application_context
from levelpipe.directories import ApplicationDirectories

context = get_application_context()
context.load_application_config("applicationConfig.json")
dirs = context.create_objects_from_app_config_json(
    ApplicationDirectories, "applicationDirectories"
)
```

SQLite:

```python
from levelpipe.dbinterface import SQLiteDatabase

with SQLiteDatabase() as db:
    db.open({"fileName": "data.db"})
    records = db.execute_query("SELECT 1 AS answer")
    records.get_value("answer", 0)  # '1'
```

Writing a file:

```python
from levelpipe.filewriter import FileWriter

writer = FileWriter("out")
writer.write_file("hello", transaction_id="20240101120000_000000001")
# -> out/20240101120000_000000001.dat
```

## What the package does not do

The package has none of the following:

- listeners that receive data over HTTP, MQTT or from watched directories;
- pipeline processors or queues that run matched data through processing steps;
- an MQTT sender;
- a command that starts an application.

Its pieces are meant to be combined by the code that uses them.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```