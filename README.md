# junglecore

`junglecore` holds core runtime building blocks of a small game engine. It has no
dependencies beyond the standard library.

## What is in the package

- **`junglecore.mathutil`**: scalar helpers `clamp`, `lerp`, `radians_to_degrees`,
  `degrees_to_radians`, `unwind_degrees` (brings an angle into [-180, 180]), `ceil_to_int`,
  `square` and `inv_sqrt`, plus the constants `PI`, `SMALL_NUMBER` and `KINDA_SMALL_NUMBER`.
- **`junglecore.vector`**: `Vector2D`, `Vector` and `Vector4` dataclasses. `Vector` has
  `dot`, `cross`, `length`, `length_squared`, in-place `normalize`, `get_safe_normal`,
  `get_unsafe_normal`, `equals` with a tolerance, `component_min`/`component_max`,
  `is_nearly_zero`, `is_zero`, the static `distance`, and named constructors such as
  `Vector.zero()`, `Vector.up()` and `Vector.forward()`.
- **`junglecore.matrix`**: `Matrix`, a row-major 4x4 matrix used with row vectors (`v * M`).
  It supports `+`, `-`, `*` (matrix or scalar), `@`, `/`, `transpose`, `inverse` (returns the
  identity for a singular matrix), `Matrix.identity()`, `Matrix.create_rotation(roll, pitch, yaw)`
  in degrees, `Matrix.create_scale`, `Matrix.create_translation`, `transform_vector`,
  `transform_fvector4` and `transform_position`.
- **`junglecore.quat`**: `Quat` with `from_axis_angle` (radians), `create_rotation` (degrees),
  multiplication, `conjugate`, `rotate_vector`, `normalize`, `is_normalized` and `to_matrix`.
- **`junglecore.names`**: `Name`, a handle to a pooled string that compares without regard
  to case, backed by a `NamePool` of `NameEntry` values and the djb2 hashes `hash_string` and
  `hash_string_lower`. Strings of 256 characters or more give the empty name, whose
  `to_string()` is `"None"`.
- **`junglecore.delegates`**: `Delegate` (one bound callable; executing it unbound raises
  `UnboundDelegateError`) and `MulticastDelegate`, whose `add` returns a `DelegateHandle`
  to pass to `remove`.
- **`junglecore.serializer`**: `write_string`/`read_string` (uint32 byte count, then UTF-8)
  and `write_wide_string`/`read_wide_string` (uint32 count of 16-bit units, then UTF-16LE)
  on binary streams. A short read raises `EOFError`.
- **`junglecore.statics`**: `UUIDGenerator` and `gen_uuid()`, sequential 32-bit identifiers
  starting at 0.
- **`junglecore.memory`**: `PlatformMemory` counts bytes and blocks per `AllocationType`
  (`OBJECT`, `CONTAINER`); `ContainerAllocator` allocates element storage as container memory;
  `size_type_bounds` gives the range of an 8-, 16-, 32- or 64-bit signed index.
- **`junglecore.stats`**: `StatId` and `ScopeCycleCounter`, a context manager that records
  nanosecond ticks elapsed since it was created.

## Installation

```
pip install .
```

## Examples

```python
from junglecore.vector import Vector
from junglecore.matrix import Matrix

v = Vector(1.0, 2.0, 3.0)
m = Matrix.create_translation(Vector(10.0, 0.0, 0.0))
assert m.transform_position(v) == Vector(11.0, 2.0, 3.0)
assert v.cross(Vector(0.0, 0.0, 1.0)) == Vector(2.0, -1.0, 0.0)
```

```python
from junglecore.delegates import MulticastDelegate

on_hit = MulticastDelegate()
handle = on_hit.add(lambda damage: print("hit for", damage))
on_hit.broadcast(5)
on_hit.remove(handle)
```

```python
import io
from junglecore.serializer import write_string, read_string

buf = io.BytesIO()
write_string(buf, "hello")
buf.seek(0)
assert read_string(buf) == "hello"
```

```python
from junglecore.names import Name

assert Name("Actor") == Name("actor")    # names compare without regard to case
assert Name("Actor").to_string() == "Actor"
```

```python
from junglecore.stats import ScopeCycleCounter

with ScopeCycleCounter("Tick") as counter:
    sum(range(1000))
print(counter.elapsed, "ns")
```

## What the package does not do

- There is no object system: no reflective classes, object construction, casting or
  lookup of live objects by class.
- There are no camera helpers: no view, perspective or orthographic projection matrices and
  no Euler-to-quaternion conversion beyond `Quat.create_rotation`.
- There are no string search or case-aware comparison helpers; use Python's `str` methods.
- It offers no command-line program and does no rendering.

## Running the tests

```
pip install .[test]
pytest
```