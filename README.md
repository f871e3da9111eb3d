# otpkeeper

The application-side logic of a TOTP/HOTP authenticator, with no GUI toolkit
attached. It builds account records, checks what the user typed in, and finds
duplicate accounts. It edits and deletes rows. It locks the app on request,
when the screen locks, or after a period of inactivity. It also reads and
writes the settings file.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install otpkeeper
```

To run the tests:

```
pip install "otpkeeper[test]"
pytest
```

## Modules

### `otpkeeper.errors`

- `ErrorDomain` is an enum of failure categories. Each member has a `quark`
  name and a numeric `code`:

  | Member           | Code |
  |------------------|------|
  | `MISSING_FILE`   | 10   |
  | `BAD_TAG`        | 11   |
  | `KEY_DERIVATION` | 12   |
  | `FILE_TOO_BIG`   | 13   |
  | `GENERIC`        | 14   |
  | `MEMLOCK`        | 15   |

- `OtpClientError(domain, message)` is the exception that carries one of these
  domains. `OtpClientError.matches(domain)` tells you whether an error belongs
  to a given domain.

### `otpkeeper.common`

- `build_json_obj(type, label, issuer, secret, digits, algo, period, counter)`
  returns an account record as a dict.
  - If the type is `TOTP` (any case), the record gets a `period` key.
  - Any other type gets a `counter` key instead.
- `object_hash(obj)` returns a stable unsigned 32-bit hash of a record's
  content. Two records with the same keys and values hash the same, whatever
  order the keys are in.
- `get_file_size(path)` returns a file's size without following symlinks. It
  raises `OSError` if the file cannot be queried.
- `builder_path(partial_path, prefix="/usr")` joins an install prefix with a
  relative resource path, such as `UI_PARTIAL_PATH`.

### `otpkeeper.data`

- `OtpEntry` holds one imported account. `OtpEntry.to_json()` turns it into a
  record.
- `DatabaseData` holds the database state: path, key, the list of records, the
  hashes of known records, and the records waiting to be added.
  - `is_duplicate(obj)` checks a record against the known hashes.
  - `queue_object(obj)` queues a record and records its hash. It returns
    `False` and leaves everything unchanged if the record is a duplicate.

### `otpkeeper.entries`

Checks for accounts entered by hand.

- `validate_input(...)` raises `InvalidInputError` at the first problem it
  finds, with a message meant for the user:
  - The label and the secret must not be empty.
  - The label and the issuer must be ASCII.
  - The secret must contain only ASCII letters and digits.
  - Digits must be made of digits only and be between 4 and 10.
  - The period, when active, must be between 10 and 120.
  - The counter, when active, must be at least 1 and below the largest 64-bit
    integer.
- `ManualEntry` holds the form values as typed, as strings.
- `parse_user_data(entry, db_data)` validates an entry, builds its record,
  queues it (duplicates are not queued again) and returns the record.
- `steam_defaults()` returns the preset for a Steam account: TOTP, SHA1,
  5 digits, a 30-second period, issuer `Steam`.
- `is_alnum_ascii` and `is_digits` are the character checks used above.

### `otpkeeper.edits`

- `edit_entry(db_data, row, label, issuer)` sets a new label and issuer on a
  stored record and returns it.
  - It raises `InvalidInputError` if a value is not ASCII or the label is
    empty.
  - It raises `IndexError` for a row that does not exist.
- `queue_otps(otps, db_data)` queues imported `OtpEntry` items, skips
  duplicates, and returns the records that were queued.

### `otpkeeper.lock`

`LockState` tracks whether the app is locked.

- `lock()` locks the app and calls the optional `on_lock` hook.
- `try_unlock(password, key, now=None)` unlocks only if the password equals
  the key, and restarts the activity clock.
- `on_screen_lock(is_locked)` locks the app when the screen locks, if
  `auto_lock` is on.
- `check_inactivity(now=None)` locks the app once `inactivity_timeout` seconds
  have passed since the last activity. It returns `False` when it has locked
  the app, meaning polling can stop.

`SCREENSAVER_SIGNALS` lists the screen-saver interfaces, object paths and
signal names that indicate a screen lock.

### `otpkeeper.accounts`

`AccountList` is the table of accounts, with one `AccountRow` per record. The
`Column` enum gives the model column order.

- `AccountList.from_json(json_data)` and `reload(json_data)` build the rows
  from the records.
- `delete_row(index, json_data)` removes a row and its record. Other rows'
  database positions shift down to stay in step. It returns the removed
  record.
- `hide_all_otps()` clears every OTP value on display.
- `needs_refresh(index, now, last_hotp_update)` says whether a selected row's
  OTP must be generated.
  - An unset value always must be.
  - A shown HOTP value is regenerated only after `HOTP_RATE_LIMIT_IN_SEC`
    (3 seconds) since the last HOTP update.
  - A shown TOTP value never is.

### `otpkeeper.settings`

- `Settings.load(path)` reads the `[config]` section of the settings file.
  Missing keys fall back to `False` or `0`.
  - A file that does not exist raises `OtpClientError` in the `MISSING_FILE`
    domain.
  - A file that cannot be read or parsed raises `OtpClientError` in the
    `GENERIC` domain.
- `Settings.save(path)` writes the preferences. It keeps any other keys
  already in the file, and creates the file if it is missing.
- `default_config_path(flatpak=False)` returns `otpclient.cfg` under the XDG
  config directory, or under the XDG data directory for sandboxed installs.

## Example

```python
from otpkeeper.common import build_json_obj
from otpkeeper.data import DatabaseData

db = DatabaseData()
record = build_json_obj("TOTP", "alice@example.com", "Example", "secret", 6, "SHA1", 30, 0)
if not db.is_duplicate(record):
    db.queue_object(record)
```

## What it does not do

This package holds logic only. It does not:

- generate OTP values;
- encrypt, decrypt or write the database file;
- read export files from other authenticator apps;
- scan QR codes;
- listen for screen-lock signals itself;
- provide a command-line tool or a graphical interface.

Those parts are left to the application that uses it.