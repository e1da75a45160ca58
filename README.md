# dungeonrun

The game logic of a small top-down roguelike. The package holds the world state
and the rules that drive it: tile maps, entities, collisions, monsters and their
AI, waves of monsters, rooms and saved player profiles. It draws nothing. Any
front end can read the state (positions, texture rectangles, opacity) and render
it.

## Modules

- `dungeonrun.geometry`: `Rect` with `intersects`, `intersection` and `contains`,
  `AlphaMask` with `alpha_at`, plus `bounding_box_test` and `pixel_perfect_test`
  for sprite collisions.
- `dungeonrun.status`: timed status effects. It provides `StatusEffectType`,
  `StatusEffect` and `StatusSystem`. Burning and poison take `intensity` hit
  points from the owner once a second. Stun stops the player's controls.
  Freezing halves the player's speed.
- `dungeonrun.level`: `LevelManager` holds a grid of one-character tiles. It
  loads a grid with `load_from_file` and answers `get_tile`, `is_wall`,
  `is_walkable`, `is_shootable` and `find_tile`. It picks the sprite-sheet
  rectangle for a tile with `tile_rect`, `path_variant` and
  `random_tile_variant`. Bad files raise `LevelError`. With no data it starts
  from a built-in default map.
- `dungeonrun.camera`: `view_for_player` returns a `View` that is centred on the
  player and clamped to the map edges.
- `dungeonrun.wave_loader`: `load_waves` reads the `SpawnPoint` entries of a wave
  file. A file that cannot be read gives an empty list.
- `dungeonrun.entity`: the `Entity` base class. It covers the bounding box,
  AABB and pixel-perfect collision, pushing two entities apart, pushing an
  entity out of unwalkable tiles (`interact_with_map`), damage, and a timed
  death.
- `dungeonrun.projectiles`: `Arrow` and `Bone`. An arrow damages whatever it
  hits except its shooter. A bone only hurts the player. Both vanish after a
  maximum distance or when they reach a wall tile.
- `dungeonrun.weapons`: the abstract `Weapon` and `Bow`, which fires arrows with
  a cooldown of `30 / attack_speed`.
- `dungeonrun.monster`: the `Monster` base, whose AI (`AIState`) wanders near
  home, chases the player and walks back, and `MonsterFactory`, which builds
  monsters from registered names.
- `dungeonrun.slime`, `dungeonrun.skeleton`, `dungeonrun.ghost`: the three
  monster kinds. The slime attacks in melee. The skeleton throws bones. The
  ghost passes through walls and dashes at the player.
- `dungeonrun.player`: `Player`. It moves from the keys in `pressed_keys`
  (`W`, `A`, `S`, `D`) or a direct call to `control`. It carries a weapon and
  tracks money, upgrades and profile stats. An optional `on_death` callback runs
  when its hit points reach zero.
- `dungeonrun.waves`: `WaveManager` reads `<room>_1.waves`, `<room>_2.waves`
  and so on from its data directory (`data` by default). It spawns one wave at a
  time and waits 5 seconds between waves. `default_factory` knows `SLIME`,
  `GHOST` and `SKELETON`.
- `dungeonrun.room`: `RoomManager` runs one room. It updates the waves,
  resolves collisions between the player, monsters, arrows and static
  obstacles, and unlocks the level's exits once every wave is done.
- `dungeonrun.profiles`: `Profile` and `ProfileManager` load and save player
  profiles as a plain text file.

## Example

```python
from dungeonrun.camera import view_for_player
from dungeonrun.level import LevelManager
from dungeonrun.player import Player
from dungeonrun.profiles import Profile, ProfileManager
from dungeonrun.room import RoomManager
from dungeonrun.weapons import Bow

level = LevelManager()
level.load_from_file("data/room1.txt")
print(level.is_walkable(6, 6), level.find_tile("r"))

player = Player(500, 320, 32, 32, level=level)
player.set_weapon(Bow(50, 10, 200))

room = RoomManager(data_dir="data")
room.attach(player, level)
room.load_room("room1")

player.pressed_keys = {"D"}
player.update(1 / 60)
room.update(1 / 60)
view = view_for_player(player.x, player.y, level, 800, 600)

profiles = ProfileManager("profiles.txt")
profiles.load_profiles()
profiles.add_profile(Profile("hero", 0, 100, 10, 0.1))
profiles.save_profiles()
```

## File formats

**Levels.** Each line of the file is one row of tiles. Empty lines are skipped,
and every remaining row must have the same width. The tiles that are walkable
are ` `, `=` and `f`. The wall tiles are `b` and `z`. Tile `z` marks an exit
block. Loading turns it into `b`, and `LevelManager.unlock_exits` turns it into
`=`.

**Waves.** Each spawn line has the form `(x, y): type`, where `x` and `y` are
tile coordinates. Lines that start with `//` are comments. The type is
upper-cased and looked up in the monster factory.

**Profiles.** There is one profile per line, in the form
`name money max_hp strength speed`.

## What the package does not do

There is no rendering, window, sound or input polling. The caller supplies the
held keys and the time step. There is no main loop and no command to start a
game. There are no menu, lobby, shop, pause or profile-selection screens. There
is no object that moves a run from room to room. A front end builds those from
`LevelManager`, `Player`, `RoomManager` and `ProfileManager`.

## Tests

```
pip install -e .[test]
pytest
```