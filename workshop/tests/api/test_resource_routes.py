"""API tests for the roster, bays, inventory, catalog and reporting endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from workshop.core.config import settings

API = settings.API_V1_STR

OIL_CHANGE = {
    "carNumber": "ABC-123",
    "carModel": "S60",
    "manufactureYear": 2022,
    "fuelType": "Diesel",
    "totalKilometers": 30000,
    "kmSinceLastService": 1000,
    "daysSinceLastService": 90,
    "serviceType": "Regular Service",
    "selectedTasks": ["Oil Change"],
}


class TestTechnicianRoutes:
    def test_list_seeded_roster(self, client: TestClient):
        response = client.get(f"{API}/technicians")

        assert response.status_code == 200
        technicians = response.json()
        assert len(technicians) == 20
        assert {"id", "name", "skill", "rating", "loadPercent", "activeJobs", "status"} <= set(
            technicians[0]
        )

    def test_create_technician(self, client: TestClient):
        response = client.post(
            f"{API}/technicians",
            json={"name": "Robin Lee", "skill": "Brake", "experienceLevel": 4},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Available"
        assert data["loadPercent"] == 0
        assert len(client.get(f"{API}/technicians").json()) == 21

    def test_create_technician_unknown_skill(self, client: TestClient):
        response = client.post(f"{API}/technicians", json={"name": "X", "skill": "Paint"})

        assert response.status_code == 422

    def test_delete_technician(self, client: TestClient):
        technician_id = client.get(f"{API}/technicians").json()[0]["id"]

        response = client.delete(f"{API}/technicians/{technician_id}")

        assert response.status_code == 204
        assert len(client.get(f"{API}/technicians").json()) == 19

    def test_delete_unknown_technician(self, client: TestClient):
        response = client.delete(f"{API}/technicians/{uuid4()}")

        assert response.status_code == 404

    def test_delete_busy_technician_conflicts(self, client: TestClient):
        client.post(f"{API}/work-orders", json=OIL_CHANGE)
        busy = next(t for t in client.get(f"{API}/technicians").json() if t["activeJobs"])

        response = client.delete(f"{API}/technicians/{busy['id']}")

        assert response.status_code == 409
        assert response.json()["detail"]["type"] == "business_rule"


class TestBayRoutes:
    def test_list_bays(self, client: TestClient):
        bays = client.get(f"{API}/bays").json()

        assert [b["label"] for b in bays] == [f"Bay {n}" for n in range(1, 7)]
        assert all(b["isAvailable"] and b["currentLoad"] == 0 for b in bays)

    def test_bay_reflects_allocation(self, client: TestClient):
        client.post(f"{API}/work-orders", json=OIL_CHANGE)

        bay = client.get(f"{API}/bays").json()[0]

        assert bay["currentLoad"] == 50
        assert len(bay["assignedTechnicians"]) == 1


class TestInventoryRoutes:
    def test_list_inventory(self, client: TestClient):
        items = client.get(f"{API}/inventory").json()

        assert len(items) == 8
        coolant = next(i for i in items if i["partName"] == "Coolant")
        assert coolant == {
            "id": coolant["id"],
            "partName": "Coolant",
            "quantity": 18,
            "minimumStock": 10,
            "isLow": False,
        }

    def test_add_and_duplicate(self, client: TestClient):
        payload = {"partName": "Wiper Blades", "quantity": 12, "minimumStock": 4}

        created = client.post(f"{API}/inventory", json=payload)
        duplicate = client.post(f"{API}/inventory", json=payload)

        assert created.status_code == 201
        assert duplicate.status_code == 409

    def test_update_item(self, client: TestClient):
        response = client.put(f"{API}/inventory/Coolant", json={"quantity": 3})

        assert response.status_code == 200
        assert response.json()["quantity"] == 3
        assert response.json()["isLow"] is True

    def test_restock(self, client: TestClient):
        response = client.post(f"{API}/inventory/Brake Pads/restock")

        assert response.status_code == 200
        assert response.json()["quantity"] == 25

    def test_delete_item(self, client: TestClient):
        assert client.delete(f"{API}/inventory/AC Cleaner").status_code == 204
        assert client.delete(f"{API}/inventory/AC Cleaner").status_code == 404

    def test_intake_consumes_stock(self, client: TestClient):
        client.post(f"{API}/work-orders", json=OIL_CHANGE)

        items = client.get(f"{API}/inventory").json()

        oil = next(i for i in items if i["partName"] == "Engine Oil (5W-30)")
        assert oil["quantity"] == 29


class TestCatalogRoutes:
    def test_service_tasks(self, client: TestClient):
        tasks = client.get(f"{API}/service-tasks").json()

        assert len(tasks) == 12
        oil = next(t for t in tasks if t["name"] == "Oil Change")
        assert oil["baseTimeHours"] == 0.5
        assert oil["category"] == "General"
        assert oil["requiredParts"] == ["Engine Oil (5W-30)"]


class TestReportingRoutes:
    def test_analytics_after_completion(self, client: TestClient):
        created = client.post(f"{API}/work-orders", json=OIL_CHANGE).json()
        client.post(f"{API}/work-orders/{created['serviceId']}/complete")

        data = client.get(f"{API}/analytics").json()

        assert data["completedServices"] == 1
        assert data["totalRevenue"] == 137.5
        assert data["technicianUtilization"] == 0.0

    def test_dashboard_stats(self, client: TestClient):
        client.post(f"{API}/work-orders", json=OIL_CHANGE)

        data = client.get(f"{API}/dashboard-stats").json()

        assert data["totalTechnicians"] == 20
        assert data["activeJobs"] == 1
        assert data["availableTechnicians"] == 19
        assert data["queueCount"] == 0
        assert data["lastUpdated"].startswith("2025-03-10T11:00:00")


class TestPlatformRoutes:
    def test_health(self, client: TestClient):
        data = client.get(f"{API}/health").json()

        assert data["status"] == "healthy"
        assert data["technicians"] == 20
        assert data["bays"] == 6
        assert data["live_work_orders"] == 0

    def test_metrics_exposed(self, client: TestClient):
        client.post(f"{API}/work-orders", json=OIL_CHANGE)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "workshop_work_orders_created_total" in response.text
        assert "workshop_http_requests_total" in response.text

    def test_correlation_id_echoed(self, client: TestClient):
        response = client.get(f"{API}/bays", headers={"X-Correlation-ID": "corr-123"})

        assert response.headers["X-Correlation-ID"] == "corr-123"

    def test_correlation_id_generated(self, client: TestClient):
        response = client.get(f"{API}/bays")

        assert response.headers["X-Correlation-ID"]
