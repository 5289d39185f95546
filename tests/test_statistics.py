from conftest import make_requests, make_user
from donorhub.models.funding import Funding


def test_dashboard_statistics_empty(client):
    response = client.get("/dashboard-statistics")
    assert response.status_code == 200
    assert response.json()["data"] == {"totalUsers": 0, "totalRequests": 0, "totalFunding": 0.0}


def test_dashboard_statistics_totals(client, db_session):
    make_user(db_session)
    make_user(db_session, email="second@bloodbank.org")
    make_requests(db_session, "donor@bloodbank.org", 3)
    db_session.add_all([Funding(amount=250.0, donor_name="A"), Funding(amount=100.5)])
    db_session.commit()

    data = client.get("/dashboard-statistics").json()["data"]
    assert data["totalUsers"] == 2
    assert data["totalRequests"] == 3
    assert data["totalFunding"] == 350.5
