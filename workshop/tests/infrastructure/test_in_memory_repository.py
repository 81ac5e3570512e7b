"""Tests for the lock-guarded in-memory repository and the demo seed."""

import threading

import pytest

from workshop.core.config import Settings
from workshop.domain.servicing.entities import Receipt
from workshop.domain.servicing.value_objects import (
    CarModel,
    ServiceType,
    Skill,
    TaskCatalogEntry,
)
from workshop.infrastructure.repositories import (
    InMemoryWorkshopRepository,
    create_repository,
)
from workshop.tests.utils.factories import (
    FIXED_NOW,
    build_work_order_service,
    make_intake,
    make_work_order,
)


class TestSeedData:
    def test_demo_shop_contents(self, repository):
        technicians = repository.list_technicians()
        bays = repository.list_bays()

        assert len(technicians) == 20
        assert len(bays) == 6
        assert len(repository.list_stock()) == 8
        assert len(repository.list_catalog()) == 12

    def test_technicians_cycle_skills(self, repository):
        skills = [t.skill for t in repository.list_technicians()]

        assert skills[:4] == [Skill.ENGINE, Skill.BRAKE, Skill.AC, Skill.GENERAL]
        assert skills.count(Skill.GENERAL) == 5

    def test_technician_attributes_in_range(self, repository):
        for technician in repository.list_technicians():
            assert 3 <= technician.experience_level <= 17
            assert 3.5 <= technician.rating <= 5.0
            assert "Volvo Certified Technician" in technician.certifications
            assert technician.job_capacity == 3

    def test_bay_types(self, repository):
        bay_types = {b.bay_number: b.bay_type for b in repository.list_bays()}

        assert bay_types == {
            1: "Diagnostic Bay",
            2: "Diagnostic Bay",
            3: "General Service Bay",
            4: "General Service Bay",
            5: "Heavy Repair Bay",
            6: "Heavy Repair Bay",
        }

    def test_same_seed_same_shop(self, test_settings):
        first = create_repository(test_settings).list_technicians()
        second = create_repository(test_settings).list_technicians()

        assert [(t.id, t.rating) for t in first] == [(t.id, t.rating) for t in second]

    def test_seeding_can_be_disabled(self):
        repository = create_repository(Settings(_env_file=None, SEED_DEMO_DATA=False))  # type: ignore[call-arg]

        assert repository.list_technicians() == []
        assert len(repository.list_catalog()) == 12

    def test_catalog_lookup(self, repository):
        entry = repository.get_catalog_entry("Brake Pad Replacement")

        assert entry.base_time_hours == 2.0
        assert entry.category == Skill.BRAKE
        assert entry.required_parts == ("Brake Pads",)
        assert repository.get_catalog_entry("brake pad replacement") is None


class TestCopies:
    def test_reads_are_copies(self, repository):
        technician = repository.list_technicians()[0]

        technician.assign_job("VOL_LEAK")

        assert repository.get_technician(technician.id).active_job_ids == []

    def test_save_replaces(self, repository):
        technician = repository.list_technicians()[0]
        technician.assign_job("VOL_1")

        repository.save_technician(technician)

        assert repository.get_technician(technician.id).active_job_ids == ["VOL_1"]

    def test_set_stock_quantity_clamps(self, repository):
        item = repository.set_stock_quantity("Coolant", -4)

        assert item.quantity == 0
        assert repository.set_stock_quantity("Unobtainium", 3) is None


class TestWorkOrdersAndReceipts:
    def test_service_id_exists_checks_live_and_history(self):
        repository = InMemoryWorkshopRepository()
        repository.save_work_order(make_work_order("VOL_LIVE"))
        repository.add_receipt(
            Receipt(
                service_id="VOL_DONE",
                car_number="ABC-1",
                car_model=CarModel.S60,
                service_type=ServiceType.REPAIR,
                selected_tasks=("Oil Change",),
                predicted_hours=0.5,
                assigned_bay="Bay 2",
                technician_names=("Alex Johnson",),
                completed_at=FIXED_NOW,
                amount=125.0,
            )
        )

        assert repository.service_id_exists("VOL_LIVE")
        assert repository.service_id_exists("VOL_DONE")
        assert not repository.service_id_exists("VOL_OTHER")

    def test_remove_work_order(self):
        repository = InMemoryWorkshopRepository()
        repository.save_work_order(make_work_order("VOL_1"))

        assert repository.remove_work_order("VOL_1") is True
        assert repository.remove_work_order("VOL_1") is False

    def test_add_catalog_entry(self):
        repository = InMemoryWorkshopRepository()
        entry = TaskCatalogEntry(name="Cabin Filter", base_time_hours=0.3)

        repository.add_catalog_entry(entry)

        assert repository.get_catalog_entry("Cabin Filter") == entry


class TestTransactions:
    def test_failed_transaction_restores_state(self, repository):
        technician = repository.list_technicians()[0]

        with pytest.raises(RuntimeError):
            with repository.transaction():
                technician.assign_job("VOL_1")
                repository.save_technician(technician)
                repository.set_stock_quantity("Coolant", 0)
                raise RuntimeError("boom")

        assert repository.get_technician(technician.id).active_job_ids == []
        assert repository.get_stock_item("Coolant").quantity == 18

    def test_nested_transaction_rolls_back_with_outer(self, repository):
        with pytest.raises(RuntimeError):
            with repository.transaction():
                with repository.transaction():
                    repository.set_stock_quantity("Coolant", 1)
                raise RuntimeError("boom")

        assert repository.get_stock_item("Coolant").quantity == 18

    def test_concurrent_intake_never_double_books(self, repository):
        service = build_work_order_service(repository)
        barrier = threading.Barrier(8)
        errors: list[BaseException] = []

        def submit():
            barrier.wait()
            try:
                service.create_work_order(make_intake(["Wheel Alignment"]))
            except BaseException as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=submit) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        orders = repository.list_work_orders()
        assert len(orders) == 8
        assert len({o.service_id for o in orders}) == 8
        assert sum(1 for o in orders if o.is_queued) == 2
        assert sorted(b.current_load for b in repository.list_bays()) == [50] * 6
