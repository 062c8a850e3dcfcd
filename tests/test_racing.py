import pytest

from katas.racing import Pilot, RacingCar, Vehicle


class _CountingVehicle(Vehicle):
    def __init__(self):
        self.calls = 0

    def accelerate(self):
        self.calls += 1


def test_racing_car_starts_full():
    car = RacingCar(40)
    assert car.remaining_fuel == car.max_fuel
    assert car.power == 0


def test_racing_car_accelerate_trades_fuel_for_power():
    car = RacingCar(40)
    for _ in range(3):
        car.accelerate()
    assert car.power == 3
    assert car.remaining_fuel == car.max_fuel - car.power


def test_pilot_accelerates_assigned_vehicle():
    vehicle = _CountingVehicle()
    pilot = Pilot()
    pilot.vehicle = vehicle
    pilot.increase_speed()
    pilot.increase_speed()
    assert vehicle.calls == 2


def test_pilot_drives_racing_car():
    car = RacingCar(10)
    Pilot(car).increase_speed()
    assert car.remaining_fuel == car.max_fuel - car.power
    assert car.power == 1


def test_pilot_without_vehicle_raises():
    with pytest.raises(RuntimeError):
        Pilot().increase_speed()


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle()