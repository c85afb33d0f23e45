# rigidsim

A small physics toolkit for particles and rigid bodies in 3D. It uses only
the Python standard library.

## What is in the package

- `rigidsim.vector3d`: `Vector3d`. Supports `+`, `-`, multiplication and
  division by a scalar, iteration, and the methods `norm`, `normalize`, `dot`,
  `cross` and `distance`. Normalizing the zero vector gives the zero vector.
- `rigidsim.quaternion`: `Quaternion(w, x, y, z)`. The default is the
  identity. Provides `from_vector`, `norm`, `normalize` (in place), the
  Hamilton product, multiplication by a scalar, `+`, indexing, `copy`,
  `rotate_by_vector` and `update_by_angular_speed(vector, time)`.
- `rigidsim.matrix33`: `Matrix33`, stored row by row and all zeros by default.
  Provides the product with a matrix or a `Vector3d`, `m[i, j]`,
  `determinant`, `inverse`, `transpose`, `invert_in_place`,
  `transpose_in_place`, `set_orientation` and `from_orientation(quaternion)`.
  `inverse` raises `SingularMatrixError` when the determinant is zero. It
  returns the cofactor matrix divided by the determinant. For a symmetric
  matrix, such as an inertia tensor, that is the inverse. For any other matrix
  it is the transpose of the inverse.
- `rigidsim.matrix44`: `Matrix44`, which supports products and `m[i, j]`.
- `rigidsim.matrix34`: `Matrix34`, an affine transform made of a 3x3 rotation
  block and a translation column. Provides `from_rotation_translation`,
  `from_matrix44`, `extract_matrix33`, `to_matrix44`, composition with `*`,
  `inverse`, `set_orientation_and_position`, `transform_position`,
  `transform_direction` and `to_column_major`.
- `rigidsim.transform`: `Transform`, which holds a position, a scale and a
  rotation. It has a `position` property and `matrix()`.
- `rigidsim.meshes`: `CuboidRectangle`, `Cube` and `Cylinder`. Each holds
  vertices, triangle indices, normals and a colour, and has
  `inertia_tensor(mass)`. `create_mesh(name)` builds a mesh with default
  dimensions from `"Cylinder"` or `"Cuboid_Rectangle"`, and raises
  `ValueError` for any other name.
- `rigidsim.component`: the abstract `Component` base class and the component
  names.
- `rigidsim.physical`:
  - `ForceSource`, an abstract force. Subclasses implement
    `force_value(component)`.
  - `Particle`, a point mass.
  - `Rigidbody`, which adds angular motion, point forces through `ForcePoint`,
    `add_force_at_point` and `add_force_at_body_point`.
  - A component's optional `gravity` force source is applied before its
    listed forces.
  - Forces act only when `is_kinematic` is `False`.
  - `update` integrates acceleration into speed.
- `rigidsim.colliders`: `ParticleCollider`, `RigidbodySphereCollider`,
  `RigidbodyCuboidRectangleCollider` (half extents, `all_points()`) and
  `RigidbodyPlaneCollider` (its normal is the rotated y axis). Each has
  `bounding_radius()`. `ColliderType` gives the shape.
- `rigidsim.game_object`:
  - `GameObject`, which holds a transform, an optional mesh and components.
  - Components can be looked up, added and removed by name or by type.
  - `add_component_by_name` adds at most one component of each name.
  - `create_component(name, game_object)` builds a component from its
    registered name.
- `rigidsim.physic_handler`: `PhysicHandler.update(game_object, dt)`. It moves
  the object by the linear speed of its physical component. If the object has
  a `Rigidbody`, it also turns the object by the angular speed.
- `rigidsim.camera`: `Camera`, a fly camera. Moves are passed to
  `update(dt, pressed)` as `CameraMove` values, and the camera also takes
  mouse and scroll input. `view_matrix()` returns a look-at `Matrix44`.
- `rigidsim.rolling_buffer`: `RollingBuffer`, which collects plot points. Its
  x values wrap every `span` units, and the buffer clears when they wrap.
- `rigidsim.prefabs`:
  - `PlanePrefab(scene, width, height)`, a thin grey slab at y = -2.
  - `RigidbodyPrefab(scene, mesh=None)`, a 2x1x1 box with a `Rigidbody`,
    unless you pass a mesh.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Example

```python
from rigidsim.game_object import GameObject
from rigidsim.physical import ForceSource, Particle, Rigidbody
from rigidsim.physic_handler import PhysicHandler
from rigidsim.prefabs import RigidbodyPrefab
from rigidsim.vector3d import Vector3d


class Gravity(ForceSource):
    NAME = "Gravity"

    def force_value(self, component):
        return Vector3d(0.0, -9.81 * component.mass, 0.0)


ball = GameObject(None)
particle = Particle(ball, mass=2.0)
particle.gravity = Gravity()
particle.is_kinematic = False
ball.add_component(particle)

box = RigidbodyPrefab(None)
box.component_of_type(Rigidbody).angular_speed = Vector3d(0.0, 1.0, 0.0)

handler = PhysicHandler()
for _ in range(50):
    for obj in (ball, box):
        obj.update(0.02)
        handler.update(obj, 0.02)

print(ball.transform.position)
print(box.transform.rotation)
```

## What it does not do

- It has no scene that owns objects, and it does not detect or resolve
  collisions. Colliders describe shapes only.
- No force sources come with it. Gravity, springs and other forces are
  subclasses of `ForceSource` that you write.
- It does not render anything and has no window or GUI. `model_matrix()`,
  `to_column_major()` and `Camera.view_matrix()` give matrices that a
  renderer can use.
- It has no command-line program.

## Running the tests

```
pytest
```