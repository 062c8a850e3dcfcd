# katas

A collection of small coding katas and design-principle examples. Each
module stands alone, and the package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `katas.sum_checker`: `validate_sum_equation(text)` checks an equation of the
  form `A+B=C`. Each of `A`, `B` and `C` must be a non-empty run of digits
  that fits a signed 32-bit integer. The function prints `PASS` or `FAIL`, and
  for malformed input it prints `FAIL (EXCEPTION: ...)` with the reason. It
  returns `True` only when the sum holds.
- `katas.alu`: `ALU` has the attributes `operand1`, `operand2` and `opcode`,
  and the opcode is one of `"ADD"`, `"SUB"` or `"MUL"`. `ALU.enable_signal()`
  returns a `Result` that holds a `Status` and a `value`. The status is
  `OPERAND1_WRONG` or `OPERAND2_WRONG` when that operand is unset, and
  `OPCODE_WRONG` when the opcode is unknown. Otherwise the status is `NORMAL`
  and `value` holds the computed value.
- `katas.wheel`: `get_price(quiz_lines, guesses)` scores a Wheel of Fortune
  round:
  - Each letter revealed pays 100 times the current streak of successful
    guesses.
  - Revealing a line's first letter while that line is still untouched pays
    1000.
  - Hitting that same line again with the very next guess pays 2000.
- `katas.gilded_rose`: `Item` (`name`, `sell_in`, `quality`) and the quality
  rules `AgedBrieItem`, `BackstagePassesItem`, `SulfurasItem` and
  `NormalItem`. Each rule wraps an `Item`, and its `update_quality()` applies
  one day's change within the 0–50 bounds.
- `katas.greeting`: `Greeter(formality).greet()` returns the greeting of the
  `Greetable` it holds, which is one of `Formal`, `Casual`, `Intimate` or
  `Normal`.
- `katas.birds`: `Bird`, `Eagle` and `Penguin`. Each of them has `fly()` and
  `molt()`. `Penguin.fly()` raises `NotImplementedError`, and
  `Penguin.swim()` moves the penguin into the water.
- `katas.racing`: `Vehicle`, `RacingCar(max_fuel)` and `Pilot`.
  `Pilot.increase_speed()` accelerates the pilot's vehicle and raises
  `RuntimeError` when the pilot has no vehicle.
- `katas.fuel`: `Car(max_fuel)` has the methods `accelerate()` and
  `refuel()`. `Shell().fill_up(car)` fills the car's tank.
- `katas.refactoring`: small refactoring exercises, namely
  `celsius_to_fahrenheit`, `square_area`, `Player`, `ranged_sum`,
  `squared_hundred_sum` and `TaxCalculator`. `TaxCalculator` charges 10% up
  to 30,000, 20% up to 100,000 and 30% above that.
- `katas.video_rental`: `PriceCode`, `Movie`, `Rental` and `Customer`.
  `Customer` has the methods `charge()`, `frequent_renter_points()` and
  `statement()`.

## Example

```python
from katas.video_rental import Customer, Movie, PriceCode, Rental

customer = Customer("Ann")
customer.add_rental(Rental(Movie("Alien", PriceCode.NEW_RELEASE), 2))
print(customer.statement())
```

## What it does not do

- There is no command-line tool. Everything is used from Python.
- `katas.gilded_rose` has no inn-wide updater:
  - Nothing picks a rule from an item's name.
  - Nothing decreases `sell_in` from day to day.

  You wrap each `Item` in its rule and advance `sell_in` yourself.