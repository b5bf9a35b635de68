import pytest

from mealmatch import MealBatch, Recipient, RecipientStore, Volunteer, VolunteerStore


@pytest.fixture
def recipients():
    """Four recipients of the hostel canteen demo."""
    return RecipientStore([
        Recipient(id=1, name="OldAgeHome", capacity=10, urgency=8, distance=1.2),
        Recipient(id=2, name="Orphanage", capacity=8, urgency=9, distance=0.8),
        Recipient(id=3, name="LocalNGO", capacity=15, urgency=6, distance=2.0),
        Recipient(id=4, name="StreetVendors", capacity=5, urgency=7, distance=0.5),
    ])


@pytest.fixture
def volunteers():
    """Three available volunteers at increasing distance."""
    return VolunteerStore([
        Volunteer(id=101, name="VolunteerA", distance=0.5),
        Volunteer(id=102, name="VolunteerB", distance=1.0),
        Volunteer(id=103, name="VolunteerC", distance=2.5),
    ])


@pytest.fixture
def batch():
    return MealBatch(id=1001, donor_id=501, quantity=20, donor_location="HostelCanteen")
