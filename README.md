# s3al

`s3al` holds the building blocks of a small simulated shell. It is written in
pure Python and needs nothing outside the standard library.

- `s3al.textutils` has string helpers: `trim`, `extract_after`,
  `extract_before`, `split_by` and `parse_command`.
- `s3al.parser` turns a command line into `&&` chains, `|` pipelines and
  `<`, `>` and `>>` redirections.
- `s3al.storage.manager.StorageManager` is an in-memory hierarchical file
  system. The whole tree can be saved as JSON in a data directory and loaded
  back.
- `s3al.commands` holds the command interface (`Command`), a
  `CommandRegistry`, and ready-made commands for files, folders, arithmetic,
  echo, HTTP GET, sleep and help.
- `s3al.terminal.lineinput.LineInput` keeps track of the line being typed and
  its cursor, and draws the line with ANSI escape codes.

## Parsing command lines

```python
from s3al.parser import parse

chains = parse("cat notes.txt | write copy.txt && ls > listing.txt")
for chain in chains:
    for segment in chain.segments:
        print(segment.command, segment.args, segment.is_piped_to_next,
              segment.input_redirect, segment.output_redirect)
```

An argument that opens with a quote runs on until a word closes that quote.
For example, `write notes.txt "hello world"` gives the two arguments
`notes.txt` and `hello world`. `parse_command` from `s3al.textutils` returns
the command word and its arguments as a tuple.

## The in-memory file system

```python
from s3al.storage.manager import StorageManager
from s3al.storage.core import StorageError

fs = StorageManager(data_dir="data")
fs.make_dir("docs")
fs.create_file("docs/readme.txt")
fs.write_file("docs/readme.txt", "first line")   # stored with a trailing newline
fs.edit_file("docs/readme.txt", "second line\n") # appended as given
print(fs.read_file("docs/readme.txt"))           # "first line\nsecond line\n"

fs.change_dir("docs")
print(fs.working_dir())          # /docs
for entry in fs.list_dir("."):
    print(entry)                 # "[F] readme.txt | created: ... | size: 23 bytes"

try:
    fs.create_file("readme.txt")
except StorageError as exc:
    print(exc.status)            # Already Exists
```

A failed operation raises `StorageError`. Its `status` is a `StorageStatus`,
which prints as `Not Found`, `Already Exists`, `Invalid Argument`,
`Already at Root` or `Error`.

`StorageManager` also offers `file_exists`, `touch_file`, `delete_file`,
`copy_file`, `move_file`, `remove_dir`, `copy_dir`, `move_dir` and `reset`.
When the target of a copy or move is an existing directory, the item goes
into that directory. Otherwise it is copied or moved under the new name.

### Snapshots

```python
path = fs.save_to_disk("snapshot")   # writes <data_dir>/snapshot.json, returns the path
fs.reset()
fs.load_from_disk("snapshot")        # the working folder goes back to the root
print(fs.list_data_files())          # ["snapshot"]
```

`read_file_from_host` reads a text file from the host. A relative name is
looked for in the current directory, then in `/app/data`, then in the data
directory.

## Commands

Every command takes its arguments, any piped input, an output stream, an
error stream and a `system` object. It returns an exit code. File and folder
commands call the matching `StorageManager` methods on `system`, so a
`StorageManager` can serve as `system` for them.

```python
import io

from s3al.commands.base import CommandRegistry
from s3al.commands.files import CatCommand, LsCommand, MkdirCommand, TouchCommand, WriteCommand
from s3al.commands.help import HelpCommand
from s3al.commands.misc import AddCommand, EchoCommand
from s3al.storage.manager import StorageManager

fs = StorageManager()
registry = CommandRegistry()
for command in (CatCommand(), LsCommand(), MkdirCommand(), TouchCommand(),
                WriteCommand(), AddCommand(), EchoCommand()):
    registry.add(command)
registry.add(HelpCommand(registry))

out, err = io.StringIO(), io.StringIO()
registry.find("touch").execute(["notes.txt"], "", out, err, fs)
registry.find("write").execute(["notes.txt", "hello", "world"], "", out, err, fs)
registry.find("cat").execute(["notes.txt"], "", out, err, fs)
registry.find("help").execute([], "", out, err, fs)   # a table of all registered commands
print(out.getvalue())
```

These commands are available:

- `s3al.commands.files`: `cat`, `cd`, `cp`, `cpdir`, `ls`, `mkdir`, `mv`,
  `mvdir`, `pwd`, `rm`, `rmdir`, `touch`, `write` and `edit`.
- `s3al.commands.misc`: `add`, `echo`, `curl` and `sleep`. `curl` makes an
  HTTP GET request with `urllib`. `sleep` stops early, with exit code 130, when
  `s3al.commands.base.interrupt_requested` is set.
- `s3al.commands.help`: `help` and `help <command>`.

`edit` reads the lines to append by calling `system.read_line()` until it
gets `:wq`. `Command.confirm_action` also calls `system.read_line()`.
`StorageManager` has no `read_line`, so give `edit` a `system` object that
adds one. `CommandRegistry.register` stores a command under another name, for
example as an alias.

## Line editing

```python
import io
from s3al.terminal.lineinput import LineInput

screen = io.StringIO()
line = LineInput(stream=screen, prompt=lambda: "$ ")
line.start_reading()
buffer, cursor = line.handle_char_input("l", "", 0)
buffer, cursor = line.handle_char_input("s", buffer, cursor)
print(line.snapshot())                         # ("ls", 2)
print(line.handle_backspace(buffer, cursor))   # ("l", 1)
```

`handle_cursor_movement` moves the cursor right (`"C"`) or left (`"D"`).
`clear_line` and `redraw` let other output be written without breaking the
line being typed.

## What this package does not do

- There is no shell that runs command lines. `s3al.parser` only describes
  chains, pipes and redirections. Nothing here executes them, passes output
  from one command to the next, or writes it to a file.
- There is no built-in command catalogue. You build a `CommandRegistry`
  yourself, as shown above.
- There are no commands for processes, memory, scheduling, logging, saving
  or loading snapshots, resetting storage or quitting. Snapshots are
  available only as `StorageManager` methods.
- There is no interactive terminal loop, no raw-mode handling of the terminal,
  and no command history.

## Running the tests

Install the package with its `test` extra, then run `python -m pytest` from
the project directory.