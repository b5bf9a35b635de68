"""Tests for entity data classes."""
import dataclasses

import pytest

from mealmatch import Assignment, BatchStatus, MealBatch, Recipient, Volunteer


class TestRecipient:
    """Tests for recipient validation."""

    def test_instantiation(self):
        """Recipient can be created with all fields."""
        r = Recipient(id=1, name="Shelter", capacity=10, urgency=5, distance=1.5)
        assert r.capacity == 10
        assert r.has_capacity

    def test_zero_capacity_allowed(self):
        """A full recipient is valid but has no capacity."""
        r = Recipient(id=1, name="Shelter", capacity=0, urgency=5, distance=1.5)
        assert not r.has_capacity

    def test_negative_capacity(self):
        """Negative capacity raises ValueError."""
        with pytest.raises(ValueError):
            Recipient(id=1, name="Shelter", capacity=-1, urgency=5, distance=1.5)

    def test_non_integer_capacity(self):
        """Fractional capacity raises TypeError."""
        with pytest.raises(TypeError):
            Recipient(id=1, name="Shelter", capacity=2.5, urgency=5, distance=1.5)

    def test_negative_distance(self):
        """Negative distance raises ValueError."""
        with pytest.raises(ValueError):
            Recipient(id=1, name="Shelter", capacity=3, urgency=5, distance=-0.1)

    def test_nan_distance(self):
        """A missing distance raises ValueError."""
        with pytest.raises(ValueError):
            Recipient(id=1, name="Shelter", capacity=3, urgency=5, distance=float("nan"))


class TestVolunteer:
    """Tests for volunteer defaults."""

    def test_available_by_default(self):
        """Volunteers start available."""
        assert Volunteer(id=7, name="Sam", distance=0.3).available is True

    def test_negative_distance(self):
        """Negative distance raises ValueError."""
        with pytest.raises(ValueError):
            Volunteer(id=7, name="Sam", distance=-1.0)

    def test_nan_distance(self):
        """A missing distance raises ValueError."""
        with pytest.raises(ValueError):
            Volunteer(id=7, name="Sam", distance=float("nan"))


class TestMealBatch:
    """Tests for batch validation and status."""

    def test_initial_status(self, batch):
        """A new batch is unassigned and remembers its quantity."""
        assert batch.status is BatchStatus.UNASSIGNED
        assert batch.initial_quantity == 20
        assert batch.allocated == 0
        assert batch.created_at.tzinfo is not None

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_non_positive_quantity(self, quantity):
        """Zero or negative quantity raises ValueError."""
        with pytest.raises(ValueError):
            MealBatch(id=1, donor_id=2, quantity=quantity)

    def test_bool_quantity_rejected(self):
        """bool is not accepted as a unit count."""
        with pytest.raises(TypeError):
            MealBatch(id=1, donor_id=2, quantity=True)

    def test_partial_status(self, batch):
        """A reduced quantity without assigned flag is partial."""
        batch.quantity = 4
        assert batch.status is BatchStatus.PARTIAL
        assert batch.allocated == 16

    def test_assigned_status(self, batch):
        """assigned flag wins over quantity."""
        batch.quantity = 0
        batch.assigned = True
        assert batch.status is BatchStatus.ASSIGNED

    def test_initial_quantity_not_an_argument(self):
        """initial_quantity is derived, not passed in."""
        with pytest.raises(TypeError):
            MealBatch(id=1, donor_id=2, quantity=3, initial_quantity=3)


class TestAssignment:
    """Tests for assignment records."""

    def test_immutable(self):
        """Assignments cannot be modified."""
        a = Assignment(batch_id=1, volunteer_id=2, recipient_id=3, quantity=4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.quantity = 5
