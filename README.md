# distract

A small library for 2D games built on pygame. It keeps the bookkeeping that
most games need out of your game code. You supply callbacks and the library
calls them at the right time.

## Installation

```
pip install distract
```

## Modules

- `distract.game`: `Game` holds the window, the entity and scene registries,
  the running `Scene`, a `SoundEmitter` (`game.sound`) and the keyboard
  `Input` (`game.input`). It provides the main-loop steps `update_scene`,
  `draw_scene`, `transmit_event`, `destroy_scene` and `reset_events`.
  `create_standard_window(width, height, title)` opens the pygame display.
  `SceneError` is raised when a pending scene id is not registered.
- `distract.scene`: `Scene` keeps its entities ordered by `z`. An entity is
  inserted before the first one whose `z` is not lower. Each scene has its
  own `ResourceManager`. `SceneInfo` pairs a scene id with its lifecycle
  function.
- `distract.entity`: `EntityInfo` holds the `create`, `update`, `draw`,
  `destroy` and `handle_event` callbacks for one entity type.
  `EntityRegistry` stores the types, and the latest registration of a type
  wins. `Entity` has `pos` (a `Vector2`), `z`, `instance`, `draw_on_gui` and
  `use_multithreading`, and a `move_towards(target, distance)` method.
  `EntityError` is raised for unknown types, failed creation, or a `create`
  callback that leaves `instance` as `None`.
- `distract.resources`: `ResourceManager` loads textures, fonts, sounds and
  music once per path and returns the cached asset afterwards. Fonts load at
  size 12. A sound also registers its buffer under the path with `"sb"`
  appended. You can pass custom loaders per `ResourceType`. Failures raise
  `ResourceError`.
- `distract.sound`: `SoundEmitter` keeps a volume percentage (default 100)
  for each of 32 sound categories. `play_sound` and `play_music` take a
  `ResourceManager`, a category and a path. Category `-1` means full volume.
  Music loops forever.
- `distract.input`: `Input` tracks each key with a `KeyState` whose flags
  are `is_being_pressed`, `is_pressed`, `is_being_released` and
  `was_pressed`. Feed it with `on_key_event(KeyEventKind.PRESSED, code)`,
  then advance it once per frame with `update(is_pressed)`. `key(code)`
  returns a copy of a key's state.
- `distract.animable`: `Animable` steps through the frames of a sprite sheet
  described by an `AnimableInfo`, which holds the frame size, frames per line
  and a list of `Animation(start_id, end_id)`. `texture_rect()` gives the
  sheet area of the current frame. If the info holds a sprite made by
  `create_sprite`, the sprite's image is cut to that area.
- `distract.graphics`: `align_bottom`, `align_right`, `center_x` and
  `center_y` each return a moved copy of a `pygame.Rect`.
  `create_sprite(texture, rect)` builds a `pygame.sprite.Sprite` showing the
  texture, cut to `rect` when one is given.
- `distract.vector`: the immutable `Vector2` supports `+`, `-`, scalar `*`,
  `magnitude()`, `normalized()`, `distance()` and `truncated()`.
  `normalized()` returns the zero vector when the length is below 0.05. Also
  provides `lerp` and `vector_lerp`.
- `distract.hashmap`: `HashMap` is a chained hash map that doubles its
  capacity as chains grow. `set` raises `DuplicateKeyError` for a key that is
  already present. `djb2_hash` is the string hash the resource manager uses.
- `distract.framebuffer`: `Framebuffer` is an RGBA byte buffer, initially
  opaque white, with `put_pixel`, `get_pixel` and `clear`. `put_pixel`
  ignores coordinates outside the buffer.
- `distract.timer`: `PausableClock` accumulates elapsed time only while
  neither the clock nor its game (`game.is_paused`) is paused.
- `distract.job`: `Job` runs an action on a background thread and exchanges
  typed messages with it. `send_message` raises `MessageQueueFull` once 255
  messages are queued. `poll_message(type_)` removes the oldest message of
  that type and returns its content, or `None` if there is none.

## A minimal game

```python
import pygame

from distract.entity import EntityInfo
from distract.game import Game, create_standard_window
from distract.vector import Vector2

PLAYER = 1
MENU = 0


def create_player(game, entity):
    entity.instance = {"speed": 3}
    return True


def update_player(game, entity):
    entity.move_towards(entity.pos + Vector2(10, 0), entity.instance["speed"])


def draw_player(game, entity):
    pygame.draw.circle(game.window, (255, 0, 0), (int(entity.pos.x), int(entity.pos.y)), 8)


def menu_lifecycle(game):
    game.create_entity(PLAYER)
    while game.is_scene_updated():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.close()
            game.transmit_event(event)
        game.update_scene()
        game.window.fill((0, 0, 0))
        game.draw_scene()
        pygame.display.flip()
    return 0


window = create_standard_window(800, 600, "My game")
game = Game(window)
game.register_entity(
    EntityInfo(PLAYER, create=create_player, update=update_player, draw=draw_player)
)
game.register_scene(MENU, menu_lifecycle)
game.set_pending_scene(MENU)
while game.has_pending_scene():
    game.load_pending_scene()
game.destroy()
```

A scene's lifecycle returns an integer. `Game.switch_to_scene(id)` ends the
current scene and makes `id` the pending one. `Game.await_scene(id)` runs
another scene on top of the current one and returns its integer. While it
runs, the current scene's music and sounds are paused. When it returns, the
music resumes at the volume of sound category 0.

By default the keyboard state is read from `pygame.key.get_pressed()` and
indexed by scancode. Pass `key_state=callable` to `Game` to supply it
yourself.

## What it does not do

- It has no command-line program. It is a library you import.
- `draw_scene` only calls each entity's `draw` callback. Clearing the window,
  drawing and flipping the display are up to your code. `game.view` and
  `game.gui_view` are plain attributes. An entity with `draw_on_gui` sees
  `game.view` set to `game.gui_view` during its draw. No camera is applied
  for you.

## Running the tests

```
pip install "distract[test]"
pytest
```