# kanetkb

Tools for a multilingual USB HID keyboard that has extra programmable "+N" keys.
The package needs nothing beyond the standard library.

It does two jobs. It manages the keyboard's settings, which are stored as JSON
files, and it models how the keyboard turns its key matrix into HID reports.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
kanetkb [--home DIR] [--data-dir DIR] [COMMAND ...]
```

Settings are read from and written to `DIR/.kanetkb`. When `--home` is not
given, `DIR` is your home directory. The language options are read from
`langoptions.store` in `--data-dir`, which defaults to `../data` relative to
the current directory. If a settings file is missing, the command prints a
warning and goes on with empty settings.

The commands are:

- `kanetkb languages`: list the lines. This is also what runs when no command
  is given. Line 1 is the fixed `QWERTY` layout. The selected languages follow
  it from line 2 on.
- `kanetkb add LANGUAGE`: add a language from the options that are not yet
  selected. At most four languages can be selected.
- `kanetkb edit NUMBER LANGUAGE`: replace the language on line `NUMBER`. The
  new language must be the current one or one that is not yet selected.
- `kanetkb remove NUMBER`: remove the language on line `NUMBER`.
- `kanetkb nkeys`: show the settings of the keys `+1` to `+5`.
- `kanetkb set-nkey KEY TYPE [--text T] [--exe E] [--param P]`: set one key.
  `TYPE` is `NONE`, `TEXT` or `ACTION`. A `TEXT` key needs `--text`, and an
  `ACTION` key needs `--exe`.

Every change is saved at once. When a choice is invalid, the command prints an
error and exits with status 1.

## Library

### Settings

- `kanetkb.store.ConfigStore(home, data_dir)` has three loaders:
  `load_lang_options()`, `load_lang_config()` and `load_nkey_config()`. It has
  two savers: `save_lang_config()` and `save_nkey_config()`. The loaded data is
  in the attributes `lang_list`, `selected_langs` and `nkey_object`. A file
  that cannot be read or written raises `ConfigError`.
- `kanetkb.languages.LanguageEditor(options, selected, on_change)` does the
  language editing:
  - `lines()` returns the rows to show.
  - `can_add()` says whether another language may be added.
  - `begin_add()` and `begin_edit(index)` return the choices offered.
  - `choose(lang)` completes the pending add or edit.
  - `remove(index)` drops the language at `index`, together with any repeats of
    it.
  - `on_change` is called with the new selection after each change.
- `kanetkb.nkeys` holds the +N key settings:
  - `NKeyConfig` describes one key. Its `key_type` is a `KeyType`, and it has
    the fields `text`, `exe` and `param`.
  - `NKeyConfig` also has `to_json()`, `from_json()`, `describe()` and
    `summary()`.
  - `NKeyTable` reads keys from the stored document and writes them back into
    it.
  - `next_page(page, key_type)` gives the order of the `WizardPage` steps that
    a setting passes through.
- `kanetkb.flowlayout` lays items out left to right, wrapping at the available
  width:
  - `FlowLayout` takes item `Size`s with `add_item`.
  - `set_geometry(rect)` places the items and returns their `Rect`s.
  - `height_for_width(width)` returns the height needed at that width.
  - `minimum_size()` returns the smallest size that holds every item.

### Keyboard model

- `kanetkb.keymap` holds the key matrix and sorts the pressed keys:
  - `CODE_CHART` maps each of the 17×8 matrix positions to a `KeyEntry`. An
    entry has a key code, modifier bits and a `KeyKind`: `CHAR`, `MODIFIER`,
    `VENDOR` or `NONE`.
  - `scan_line(line_no, port_value)` returns the entries of one line whose bits
    are set.
  - `scan_matrix(line_values)` scans all 17 lines and keeps at most eight
    pressed positions.
  - `sort_keys(entries)` splits them into a `SortedKeys`. Only four vendor keys
    are kept.
- `kanetkb.reports` builds the reports sent to the host:
  - `build_input_report(keys)` makes the boot keyboard `InputReport`, which has
    modifiers and up to six key codes. Its `to_bytes()` returns 8 bytes.
  - `build_vendor_report(keys)` makes the 8-byte vendor endpoint report.
  - `HID_REPORT_DESCRIPTOR` is the report descriptor itself.
  - `KeyboardReporter.task(keys, sof_count)` returns the input and vendor
    packets to send on one pass, with `None` for a packet that should not be
    sent. The input report is sent when it changes or when the idle rate has
    elapsed. The vendor report is sent only when it changes.
  - `KeyboardReporter.set_idle_rate(report_id, rate)` applies a SET_IDLE
    request.
- `kanetkb.leds.LedBank` tracks the `Led` latches. It has `enable`, `on`, `off`,
  `toggle` and `get`. `apply_output_report(value)` sets the caps, num and
  scroll lock LEDs from the host's output report byte.
- `kanetkb.status.StatusBlinker.update(configured, suspended)` steps the USB
  status blink pattern by one millisecond and returns whether the LED is lit.

```python
from kanetkb.keymap import scan_matrix, sort_keys
from kanetkb.reports import build_input_report

keys = sort_keys(scan_matrix([0] * 17))
print(build_input_report(keys).to_bytes())   # eight zero bytes: nothing pressed
```

## What it does not do

- There is no graphical configuration window. Settings are changed through the
  `kanetkb` command or the classes above.
- Saving settings does not tell a running keyboard service to reload them.
- The keyboard model never talks to a USB device or reads real hardware. It
  works only on the port values, frame counts and report bytes that it is given.