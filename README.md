# gridquest

A small 2D game built on pygame. It opens on a start menu and moves to a
play field once the start button is clicked. In the play field a hero walks
over a grid and carries a paged inventory. The current frame rate is shown
in the top-left corner.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

Run the game from the directory that holds the `photos/` folder:

```
gridquest
```

The window is 800 × 600. Click **START_THE_GAME** on the menu to begin.
The button grows while the cursor is over it and shrinks while the left
mouse button is held on it.

In the play field:

| Key          | Action                                       |
|--------------|----------------------------------------------|
| `J` / `L`    | move left / right                            |
| `I` / `K`    | move up / down                               |
| `F`          | open or close the inventory                  |
| `W` / `Up`   | select the previous item (inventory open)    |
| `S` / `Down` | select the next item (inventory open)        |

The hero moves at 96 pixels per second and cannot leave the window. The
selection wraps around at either end of the bag.

While the inventory is open, the **Prev** and **Next** buttons turn its
pages and the red **X** closes it. Each page shows up to four items per
row and five rows. Hovering over an item shows its name; stacks of more
than one show their count. The panel also shows the page number and how
many items the bag holds against its capacity.

## Images

The game loads these files, relative to the working directory:

- `photos/beijing.png`: menu background
- `photos/playBeijing.png`: play field background
- `photos/zhu.png`: the hero
- `photos/type/jinBi.png`, `photos/type/SwordXinShou.png`,
  `photos/type/Sword1.png`: inventory items

If an image cannot be loaded, `gridquest` prints the error to standard
error and exits with status 1 before the game starts.

## Using the pieces

The screens take their images and their input from outside, so they can be
driven without a window:

- `gridquest.frame_input.FrameInput` holds one frame's cursor, held and
  just-pressed keys, and left mouse button state. `key_down`,
  `key_just_pressed` and `cursor_in` query it.
- `gridquest.items` has `ItemData` (an item kind, whose `image()` loads its
  picture on first use), `Item` (a stack with a count), `item_catalog()`
  and `load_image()`, which raises `FileNotFoundError` for a missing file.
- `gridquest.menu_screen.MenuScreen` is the start menu. `update(frame)`
  returns `True` once the start button has been clicked, and
  `button_layout(cursor, mouse_down)` returns the button's `ButtonLayout`.
- `gridquest.play_screen.PlayScreen` is the play field. `default_bag()`
  gives the starting items: 50000 gold, 1000 starter swords and one
  level-one sword, in a bag of capacity 5. `move_player`, `item_slots`,
  `total_pages` and `handle_inventory_click` expose its movement and
  inventory logic.
- `gridquest.game.Game` switches from the menu to the play field;
  `gridquest.game.main()` opens the window and runs the loop.

## What it does not do

The play field has no map content: the grid is drawn as lines and its cells
are all empty. Items cannot be used, dropped or picked up, and there is no
saving or loading of progress.