"""Unit tests for the shop entities and their derived fields."""

from uuid import uuid4

import pytest

from workshop.domain.servicing.entities import ServiceBay, StockItem, Technician
from workshop.domain.servicing.value_objects import (
    Skill,
    TechnicianStatus,
    WorkOrderStatus,
)
from workshop.domain.shared.exceptions import BusinessRuleError, ValidationError
from workshop.tests.utils.factories import FIXED_NOW, make_work_order


class TestTechnician:
    def test_new_technician_available(self):
        technician = Technician(name="Alex Johnson", skill=Skill.ENGINE)

        assert technician.status == TechnicianStatus.AVAILABLE
        assert technician.load_percent == 0
        assert technician.has_capacity

    def test_load_and_status_follow_job_list(self):
        technician = Technician(name="Maria Garcia", skill=Skill.BRAKE)

        technician.assign_job("VOL_1")
        assert technician.load_percent == 33
        assert technician.status == TechnicianStatus.BUSY

        technician.assign_job("VOL_2")
        assert technician.load_percent == 67

        technician.assign_job("VOL_3")
        assert technician.load_percent == 100
        assert not technician.has_capacity

    def test_fourth_job_refused(self):
        technician = Technician(
            name="James Smith", skill=Skill.AC, active_job_ids=["A", "B", "C"]
        )

        with pytest.raises(BusinessRuleError) as exc_info:
            technician.assign_job("D")

        assert exc_info.value.rule_name == "TECHNICIAN_AT_CAPACITY"
        assert technician.active_job_ids == ["A", "B", "C"]

    def test_assigning_same_job_twice_is_noop(self):
        technician = Technician(name="Emma Wilson", skill=Skill.GENERAL)

        technician.assign_job("VOL_1")
        technician.assign_job("VOL_1")

        assert technician.active_job_ids == ["VOL_1"]

    def test_release_restores_load(self):
        technician = Technician(name="David Brown", skill=Skill.ENGINE, active_job_ids=["A"])

        technician.assign_job("B")
        assert technician.release_job("B") is True

        assert technician.load_percent == 33
        assert technician.active_job_ids == ["A"]

    def test_release_unknown_job(self):
        technician = Technician(name="Mia Harris", skill=Skill.ENGINE)

        assert technician.release_job("nope") is False
        assert technician.status == TechnicianStatus.AVAILABLE

    def test_general_work_goes_to_anyone(self):
        technician = Technician(name="John White", skill=Skill.BRAKE)

        assert technician.can_handle(Skill.GENERAL)
        assert technician.can_handle(Skill.BRAKE)
        assert not technician.can_handle(Skill.ENGINE)

    def test_derived_fields_serialized(self):
        technician = Technician(name="Ava Jackson", skill=Skill.AC, active_job_ids=["A"])

        data = technician.model_dump()

        assert data["load_percent"] == 33
        assert data["status"] == TechnicianStatus.BUSY


class TestServiceBay:
    def test_label_and_empty_state(self):
        bay = ServiceBay(bay_number=4)

        assert bay.label == "Bay 4"
        assert bay.current_load == 0
        assert bay.is_available
        assert bay.free_slots == 3

    def test_occupy_and_release(self):
        bay = ServiceBay(bay_number=1)
        techs = [uuid4(), uuid4()]

        bay.occupy("VOL_1", techs)
        assert bay.current_load == 50
        assert bay.assigned_technician_ids == techs

        assert bay.release("VOL_1") == techs
        assert bay.current_load == 0
        assert bay.assigned_technician_ids == []

    def test_load_capped_at_100(self):
        bay = ServiceBay(bay_number=1)
        tech = uuid4()

        for order_id in ("A", "B", "C"):
            bay.occupy(order_id, [tech])

        assert bay.current_load == 100
        assert bay.assigned_technician_ids == [tech]

    def test_technician_cap_enforced(self):
        bay = ServiceBay(bay_number=2)
        bay.occupy("A", [uuid4(), uuid4()])

        with pytest.raises(BusinessRuleError) as exc_info:
            bay.occupy("B", [uuid4(), uuid4()])

        assert exc_info.value.rule_name == "BAY_AT_CAPACITY"
        assert list(bay.order_assignments) == ["A"]

    def test_full_bay_unavailable(self):
        bay = ServiceBay(bay_number=3)
        bay.occupy("A", [uuid4(), uuid4(), uuid4()])

        assert not bay.is_available
        assert not bay.is_eligible(90)

    def test_fit_keeps_present_technicians_free(self):
        present = uuid4()
        bay = ServiceBay(bay_number=1, order_assignments={"A": [present, uuid4()]})
        newcomers = [uuid4(), uuid4()]

        fitted = bay.fit_technicians([present, *newcomers])

        assert fitted == [present, newcomers[0]]

    def test_load_ceiling_blocks_eligibility(self):
        bay = ServiceBay(bay_number=5, load_per_job=50)
        tech = uuid4()
        bay.occupy("A", [tech])
        bay.occupy("B", [tech])

        assert bay.is_available
        assert bay.current_load == 100
        assert not bay.is_eligible(90)

    def test_release_unknown_order(self):
        bay = ServiceBay(bay_number=1)

        assert bay.release("missing") == []


class TestStockItem:
    def test_reserve_clamps_at_zero(self):
        item = StockItem(part_name="Coolant", quantity=1, minimum_stock=10)

        assert item.reserve_one() == 0
        assert item.reserve_one() == 0
        assert item.is_out

    def test_low_stock(self):
        item = StockItem(part_name="Air Filter", quantity=10, minimum_stock=10)

        assert not item.is_low
        item.reserve_one()
        assert item.is_low

    def test_restock(self):
        item = StockItem(part_name="Spark Plugs", quantity=3)

        assert item.restock(5) == 8

    def test_negative_restock_rejected(self):
        item = StockItem(part_name="Spark Plugs", quantity=3)

        with pytest.raises(ValueError):
            item.restock(-1)


class TestWorkOrder:
    def test_progress_clamped(self):
        order = make_work_order("VOL_1")

        order.advance_progress(-20)
        assert order.progress == 0

        order.advance_progress(40)
        assert order.progress == 40
        assert order.status == WorkOrderStatus.IN_PROGRESS

    def test_progress_100_moves_to_completing(self):
        order = make_work_order("VOL_1")

        order.advance_progress(150)

        assert order.progress == 100
        assert order.status == WorkOrderStatus.COMPLETING

    def test_progress_must_be_integer(self):
        order = make_work_order("VOL_1")

        with pytest.raises(ValidationError):
            order.advance_progress(12.5)  # type: ignore[arg-type]

    def test_completed_order_rejects_progress(self):
        order = make_work_order("VOL_1")
        order.close(["Alex Johnson"], FIXED_NOW, 250.0)

        with pytest.raises(BusinessRuleError):
            order.advance_progress(50)

    def test_queued_order_rejects_progress(self):
        order = make_work_order("VOL_Q", status=WorkOrderStatus.QUEUED, queue_position=1)

        with pytest.raises(BusinessRuleError) as exc_info:
            order.advance_progress(100)

        assert exc_info.value.rule_name == "ORDER_QUEUED"
        assert order.status == WorkOrderStatus.QUEUED
        assert order.progress == 0

    def test_close_produces_receipt(self):
        order = make_work_order("VOL_7")

        receipt = order.close(["Alex Johnson", "Maria Garcia"], FIXED_NOW, 250.0)

        assert order.status == WorkOrderStatus.COMPLETED
        assert receipt.service_id == "VOL_7"
        assert receipt.amount == 250.0
        assert receipt.technician_names == ("Alex Johnson", "Maria Garcia")
        assert receipt.completed_at == FIXED_NOW

    def test_queued_order_is_valid_without_bay(self):
        order = make_work_order("VOL_Q", status=WorkOrderStatus.QUEUED, queue_position=2)

        assert order.is_queued
        assert order.is_valid()
        assert order.assigned_bay == "QUEUED"

    def test_in_progress_order_without_bay_is_invalid(self):
        order = make_work_order("VOL_8")
        order.assigned_bay_id = None

        assert not order.is_valid()
        with pytest.raises(BusinessRuleError) as exc_info:
            order.validate_rules()
        assert exc_info.value.rule_name == "ENTITY_INVALID"
