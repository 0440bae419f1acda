# storuntime

Runtime support for a compiler that picks the cheapest internal
representation for each value. It covers:

- overflow checks for signed 64-bit arithmetic, so that a value can move
  from a machine integer to an arbitrary-precision number when it has to
- `BigDecimal`, a signed decimal integer of any length that can add,
  subtract, multiply, divide and compare
- `SSOString`, an immutable string that reports inline storage up to
  23 bytes (UTF-8) and heap storage beyond that
- rules that decide from a literal's text whether it needs a big number or
  heap storage, and helpers that print runtime values
- fixed-size arrays, growable typed lists and typed tuples, counted by a
  `Runtime` that keeps allocation statistics

## Installation

```
pip install storuntime
```

There are no runtime dependencies. To run the tests:

```
pip install "storuntime[test]"
pytest
```

## Modules

| Module                  | Contents                                                     |
|-------------------------|--------------------------------------------------------------|
| `storuntime.types`      | `InternalType`, `MemLocation`, `TypeInfo`                    |
| `storuntime.overflow`   | `add_will_overflow`, `sub_will_overflow`, `mul_will_overflow`, `safe_add`, `safe_sub`, `safe_mul`, `Int64OverflowError`, `INT64_MIN`, `INT64_MAX` |
| `storuntime.bigdecimal` | `BigDecimal`                                                 |
| `storuntime.sso`        | `SSOString`, `INLINE_CAPACITY`                               |
| `storuntime.infer`      | `infer_numeric_type`, `infer_string_type`, `format_double`, `print_int64`, `print_double` |
| `storuntime.containers` | `Runtime`, `Array`, `List`, `Tuple`, `MemStats`              |

## Overflow-checked int64 arithmetic

```python
from storuntime.overflow import INT64_MAX, add_will_overflow, safe_add, safe_mul, Int64OverflowError

add_will_overflow(100, 200)        # False
add_will_overflow(INT64_MAX, 1)    # True

safe_add(100, 200)                 # 300
safe_mul(1_000_000, 1_000_000)     # 1000000000000

try:
    safe_mul(INT64_MAX, 2)
except Int64OverflowError:
    ...  # move the value to a BigDecimal
```

`Int64OverflowError` is a subclass of `OverflowError`. Operands that are
themselves outside the int64 range raise `ValueError`.

## BigDecimal

```python
from storuntime.bigdecimal import BigDecimal

big = BigDecimal.from_int(2**63 - 1) + BigDecimal.from_int(1)
str(big)                                        # '9223372036854775808'

product = BigDecimal.from_string("123456789") * BigDecimal.from_string("987654321")
str(product)                                    # '121932631112635269'

str(BigDecimal.from_int(30) - BigDecimal.from_int(100))   # '-70'

BigDecimal.from_int(-50).compare(BigDecimal.from_int(-100))   # 1
BigDecimal.from_int(50) < BigDecimal.from_int(100)            # True

str(BigDecimal.from_int(100).divide(BigDecimal.from_int(4)))  # '25'
```

- `from_string` accepts an optional `-` followed by decimal digits and
  raises `ValueError` for anything else.
- Arithmetic and comparison also accept plain `int` operands.
- `divide` is an integer division that truncates toward zero; dividing by
  zero raises `ZeroDivisionError`.
- `from_float` keeps 15 significant digits of the float as text. Such a
  value can be printed, compared and converted with `to_float`, but
  arithmetic on a value with a fractional part raises `ValueError`.
- `to_int` returns the integer part, clamped to the int64 range.

## SSOString

```python
from storuntime.sso import SSOString

short = SSOString("Hello")
short.is_heap              # False
short.flags                # 10: inline length 5 in bits 1-7
len(short)                 # 5

joined = SSOString("This is a longer") + SSOString(" string example")
joined.is_heap             # True: 31 bytes do not fit inline
joined.flags               # 1
str(joined)                # 'This is a longer string example'

text = SSOString("Hello World, Hello Universe")
text.find("World")         # 6
text.find("NotFound")      # -1
str(text.substring(0, 5))  # 'Hello'

SSOString("filename.txt").ends_with(".txt")   # True
SSOString.from_int(-123).to_int()             # -123
```

`substring` clamps the length at the end of the string and raises
`IndexError` when `start` is at or past the end. `to_int` reads a leading
integer the way `atoll` does and returns 0 when there is none.

## Literal inference and printing

```python
from storuntime.infer import infer_numeric_type, infer_string_type, format_double
from storuntime.types import InternalType

infer_numeric_type("42")                     # InternalType.INT64
infer_numeric_type("12345678901234567890")   # InternalType.BIGDECIMAL

infer_string_type("short")                              # InternalType.SSO_STRING
infer_string_type("a string longer than 23 bytes")      # InternalType.HEAP_STRING

format_double(0.1)                           # '0.1'
```

`print_int64` and `print_double` write a value and a newline to standard
output.

## Containers

```python
from storuntime.containers import Runtime

runtime = Runtime()
numbers = runtime.array(4, 8)
numbers[0] = (42).to_bytes(8, "little", signed=True)
numbers[1]                    # b'\x00' * 8: arrays start zero-filled
len(numbers)                  # 4

items = runtime.list(0)       # capacity 0 means the default of 4
items.append(3, 1)            # value, element type tag
items.get(0), items.type_of(0)   # (3, 1)
len(items)                    # 1

pair = runtime.tuple(2)
pair.set(0, 1.5, 2)

runtime.stats().total_allocations   # 3
```

Array elements are byte strings of exactly `elem_size` bytes. List and tuple
elements are ints in the int64 range or floats, each with a type tag of one
byte. Indexing past the end of an array, list or tuple raises `IndexError`.

## What this package does not do

It is a library only: it has no command-line program and does not compile or
run programs itself. `MemStats` counts container allocations in
`total_allocations`; its big-decimal and heap-string counters are not
updated by anything in the package.