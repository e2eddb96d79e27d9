# spycity

A small simulation of a 7×7 city. An enemy spy network, its case officer,
a counterintelligence officer and 127 ordinary citizens are housed and given
jobs. A curses monitor shows the result. The package also holds a few small
design-pattern examples.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is in the package

- `spycity.cell`: the city grid.
  - `CellType` is one of wasteland, residential building, city hall,
    company or supermarket.
  - `City` is a grid of `Cell`s addressed as `cells[x][y]`. It offers
    `get_cell`, `define_monitoring`, `clear`, `initialize_surveillance`,
    `find_buildings` and `render`.
  - `get_cell` raises `IndexError` outside the grid.
  - `find_buildings` scans row by row and raises `ValueError` for a
    non-positive count.
  - `default_city()` returns the fixed 7×7 layout.
  - `should_be_monitored()` is true for companies and the city hall.
- `spycity.character_factory`: the dataclasses `Character`, `SourceAgent`,
  `AttendingOfficer` and `CounterIntelligenceOfficer`.
  - They are built by `new_citizen`, `new_spy_with_licence`,
    `new_spy_without_licence`, `new_case_officer` and
    `new_counter_intelligence_officer`.
  - Every character gets a unique id counting from 1, and a health of 10.
  - `reset_ids()` restarts the numbering.
- `spycity.simulation`: `SpySimulation.setup()` fills a `SimulationMemory`
  in this order:
  1. It hides the mailbox in a random residential building.
  2. It houses three spies in residences off the mailbox's row and column,
     within a distance of 4. Only the first spy has a licence to kill.
  3. It spreads the citizens, then the case officer, over the least
     populated residences.
  4. It places the counterintelligence officer at the city hall.
  5. It gives jobs: 10 at the city hall, 3 per supermarket and 5 per
     company. Every citizen who is left goes to a random company.
  6. It counts each company's staff. `information_distribution()` gives the
     information a company of that size holds, by `Priority`.

  `euclidean_distance()` and the `Clock`, `Message` and `CompanyPriority`
  dataclasses also live here.
- `spycity.timer`: `Timer.tick()` advances the clock by ten minutes and rolls
  over hours and days. `Timer.run()` ticks until `has_simulation_ended()`.
  That happens when the simulation has been marked as ended, or after turn
  2015.
- `spycity.monitor`: `Monitor` draws four curses panels. They show the city
  map with its legend, the characters, the mailbox and the enemy country
  monitor.
  - The text of each block comes from plain functions that can be used
    without a terminal: `citizen_lines`, `spy_lines`, `case_officer_lines`,
    `counter_officer_lines`, `mailbox_lines`, `enemy_monitor_lines`,
    `count_citizens`, `format_clock`, `end_message` and `city_glyph`.
- `spycity.monitor_app`: the interactive monitor. `run(stdscr, memory)` needs
  a terminal of at least 45 rows × 140 columns.
- `spycity.logger`: `log_info`, `log_error` (red) and `log_debug` (cyan)
  print timestamped lines.
- `spycity.patterns`: short examples.
  - `facade` holds `FieldStore` and `Facade`.
  - `factory` holds `Person`, `PersonFactory` and `Role`.
  - `observer` holds `Subject`, `Observer` and `Event`. A subject has three
    observer slots.
  - `state` holds `DailyRoutine`: home, company, work, an optional
    supermarket trip one time in four, then back home.

## Commands

    spycity-simulation [--seed N]

Sets up a city and prints its map. It then logs where the mailbox is and how
many characters of each kind were created.

    spycity-timer INTERVAL PID [PID ...]

Runs a clock that ticks every `INTERVAL` seconds. An interval of one second or
more is rounded down to whole seconds. It runs until 2016 turns have passed.
At each tick it sends `SIGALRM` to every PID after the first. It exits with
status 1 if it is given fewer than two arguments or arguments that are not
numbers.

    spycity-monitor [--seed N]

Sets up a city and shows it in the terminal. It quits on `q`, `Q`, `Esc` or
`SIGTERM`. If the terminal is smaller than 45 × 140, it prints an error and
exits with status 1.

Pattern examples, each logging what it does:

    spycity-facade-demo
    spycity-factory-demo
    spycity-observer-demo
    spycity-state-demo

## Using the library

    import random
    from spycity.cell import CellType, default_city
    from spycity.simulation import SpySimulation, information_distribution

    city = default_city()
    print(city.render(), end="")
    hall = city.find_buildings(CellType.CITY_HALL, 1)[0]

    memory = SpySimulation(rng=random.Random(1)).setup()
    print(memory.mailbox_coordinate, len(memory.citizens))

    print(information_distribution(25))
    # InformationDistribution(crucial=0, strong=1, medium=12, low=20, very_low=30)

## What the package does not do

- Nothing happens in the city after setup. Characters do not move, spies do
  not steal information and officers do not hunt anyone.
- Nothing writes messages into the mailbox or deciphers them. The mailbox
  and enemy country panels of the monitor stay empty.
- The commands do not share memory with one another. Each works on its own
  `SimulationMemory` in its own process. The timer's clock is therefore not
  seen by the monitor, and the monitor's step and time readings stay at zero.