# ztdb

`ztdb` holds time/value samples for fixed-width variables. It also reads and
writes a compact binary file that describes those variables by name and
width.

## Installation

```
pip install .
```

## Variables

`ztdb.var.Var` has a name and a width in bits, from 1 to 64. A width above
64 is truncated to 64 and a width of 0 or less becomes 1. Both cases emit a
`UserWarning`. `Var.max` is the largest value the width can hold.

```python
from ztdb.var import Var

clk = Var("clk", 8)
clk.add(10, 3)
clk.add(20, 300)      # too wide for 8 bits: stored as ZTDB_RANGE
clk.add(5, 1)

len(clk)              # 3
clk.first()           # (5, 1); None when there are no samples
list(clk)             # [(5, 1), (10, 3), (20, ZTDB_RANGE)]
clk.at(12)            # first pair at or after time 12: (20, ZTDB_RANGE)
clk.at(99)            # None
```

Samples are kept in time order. Samples with the same time stay in the
order they were added. The value `ZTDB_UNKNOWN` is stored as it is, even
though it is wider than the variable.

### Formatting

`value_width(hex)` gives the number of digits any value of the variable
needs. `value_string(value, hex)` pads the value to that width.

- In hexadecimal the value gets a `0x` prefix and is zero-padded.
- In decimal it is right-aligned.
- Unknown values print as a run of `U` and out-of-range values as a run of `R`. The run has the same length as a formatted value, including the `0x` in hex.

```python
clk.value_string(3, hex=True)     # '0x03'
clk.value_string(3, hex=False)    # '  3'
```

`time_precise(time, precision)` divides a raw time by `10**precision`.
`precision` must be 0 to 12, otherwise `ValueError` is raised.

`dump(prefix, precision, hex, file)` prints a header line with the sample
count. It then prints one line per sample, with the scaled time and the
formatted value. Output goes to standard output unless `file` is given.

```python
import sys
clk.dump("clk", precision=3, hex=True, file=sys.stdout)
```

## Variable files

`ztdb.varfile` stores the names and widths of variables. The file is made of
little-endian 32-bit words:

- a version (1.0);
- the variable count;
- the offset of the name strings;
- one packed word per variable, holding the type, the width (64 stored as 0) and the name offset;
- then the NUL-terminated UTF-8 names.

```python
from ztdb.var import Var
from ztdb.varfile import write_vars, read_vars, encode_vars, decode_vars

write_vars("signals.var", [Var("clk", 1), Var("data", 64)])
names = [v.name for v in read_vars("signals.var")]   # ['clk', 'data']

blob = encode_vars([Var("a", 4)])
decode_vars(blob)                                    # [Var(name='a', size=4, samples=0)]
```

`VarFileError` is raised in these cases:

- the data is too short;
- the version is not 1.0;
- a name offset lies past the end of the data;
- a name is not valid UTF-8;
- a name contains a NUL character;
- a name offset does not fit in 24 bits.

### Word-level helpers

`ztdb.common` holds the word-level pieces:

- `pack_var_info` / `unpack_var_info`, with `VarInfo` and `VarType`;
- `pack_version` / `unpack_version`;
- the special values `ZTDB_MAX`, `ZTDB_UNKNOWN` and `ZTDB_RANGE`.

## What it does not do

- Variable files hold only names and widths. The time/value samples of a `Var` live in memory and are not saved or loaded by this package.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```