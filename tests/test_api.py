API = "/api/v1"

EVENT_FORM = {
    "title": "Village Outreach",
    "description": "Medical mission and open-air crusade",
    "date": "2024-05-04T09:30",
    "location": "Kuje",
    "imageUrl": "",
    "videoUrl": "",
    "type": "future",
}

SERMON_FORM = {
    "title": "Sunday Service",
    "speaker": "J. Doe",
    "date": "2024-01-07T10:00",
    "duration": "45 mins",
    "videoUrl": "https://example.com/v1",
}


def test_root_and_health(client):
    root = client.get("/")
    assert root.status_code == 200
    assert f"{API}/home" in root.json()["public"]

    response = client.get(f"{API}/health/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store"] == "reachable"
    assert body["timestamp"].endswith("Z")


def test_dashboard_requires_a_token(client):
    assert client.get(f"{API}/admin/dashboard").status_code == 401


def test_login_with_bad_password(client, operator):
    response = client.post(f"{API}/auth/login", data={"username": operator["email"], "password": "nope"})
    assert response.status_code == 401


def test_me(client, auth_headers, operator):
    response = client.get(f"{API}/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == operator["email"]


def test_logout_revokes_the_token(client, auth_headers):
    response = client.post(f"{API}/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["redirect"] == "/login"

    assert client.get(f"{API}/auth/me", headers=auth_headers).status_code == 401


def test_empty_dashboard(client, auth_headers):
    response = client.get(f"{API}/admin/dashboard", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data == {"loading": False, "events": [], "sermons": [], "documents": []}


def test_create_update_delete_event(client, auth_headers):
    created = client.post(f"{API}/admin/events", data=EVENT_FORM, headers=auth_headers)
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["message"] == "Event created successfully"
    assert body["notifications"] == [{"level": "success", "message": "Event created successfully"}]
    [event] = body["data"]
    assert event["date"] == "2024-05-04T09:30:00.000Z"
    assert event["imageUrl"] is None
    assert event["videoUrl"] is None

    form = client.get(f"{API}/admin/events/{event['id']}/form", headers=auth_headers).json()["data"]
    assert form["mode"] == "edit"
    assert form["values"]["title"] == "Village Outreach"
    assert form["values"]["date"] == "2024-05-04T09:30"

    updated = client.post(
        f"{API}/admin/events/{event['id']}",
        data={**EVENT_FORM, "title": "Village Outreach (Day 2)", "type": "current"},
        headers=auth_headers,
    )
    assert updated.status_code == 200, updated.text
    [event_after] = updated.json()["data"]
    assert event_after["id"] == event["id"]
    assert event_after["title"] == "Village Outreach (Day 2)"
    assert event_after["type"] == "current"

    refused = client.delete(f"{API}/admin/events/{event['id']}", headers=auth_headers)
    assert refused.status_code == 409
    assert refused.json()["detail"]["message"] == "Are you sure you want to delete this event?"
    assert len(client.get(f"{API}/admin/events", headers=auth_headers).json()["data"]) == 1

    deleted = client.delete(f"{API}/admin/events/{event['id']}?confirm=true", headers=auth_headers)
    assert deleted.status_code == 200
    assert deleted.json()["data"]["events"] == []


def test_invalid_event_type_is_rejected(client, auth_headers):
    response = client.post(f"{API}/admin/events", data={**EVENT_FORM, "type": "weekly"}, headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["detail"]["errors"][0]["field"] == "type"
    assert client.get(f"{API}/admin/events", headers=auth_headers).json()["data"] == []


def test_event_update_without_type_is_rejected(client, auth_headers):
    created = client.post(f"{API}/admin/events", data={**EVENT_FORM, "type": "past"}, headers=auth_headers)
    [event] = created.json()["data"]
    without_type = {key: value for key, value in EVENT_FORM.items() if key != "type"}

    response = client.post(f"{API}/admin/events/{event['id']}", data=without_type, headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["detail"]["errors"][0]["field"] == "type"
    [stored] = client.get(f"{API}/admin/events", headers=auth_headers).json()["data"]
    assert stored["type"] == "past"


def test_new_event_form_preselects_future(client, auth_headers):
    form = client.get(f"{API}/admin/events/form", headers=auth_headers).json()["data"]
    assert form["mode"] == "create"
    assert form["values"] == {"type": "future"}


def test_sermon_scenario(client, auth_headers):
    client.post(
        f"{API}/admin/sermons",
        data={**SERMON_FORM, "title": "Earlier", "date": "2023-12-31T10:00"},
        headers=auth_headers,
    )

    response = client.post(f"{API}/admin/sermons", data=SERMON_FORM, headers=auth_headers)

    assert response.status_code == 201, response.text
    sermons = response.json()["data"]
    assert [sermon["title"] for sermon in sermons] == ["Sunday Service", "Earlier"]
    assert sermons[0]["date"] == "2024-01-07T10:00:00.000Z"
    assert sermons[0]["speaker"] == "J. Doe"
    assert sermons[0]["videoUrl"] == "https://example.com/v1"

    public = client.get(f"{API}/resources/sermons").json()["data"]
    assert [sermon["title"] for sermon in public] == ["Sunday Service", "Earlier"]


def test_document_crud_and_public_listing(client, auth_headers):
    response = client.post(f"{API}/admin/documents", data={
        "title": "Mission Report",
        "description": "2023 annual report",
        "fileUrl": "https://files.example.com/report.pdf",
        "fileType": "PDF",
        "fileSize": "2.4 MB",
    }, headers=auth_headers)
    assert response.status_code == 201, response.text

    documents = client.get(f"{API}/resources/documents").json()["data"]
    assert documents[0]["fileSize"] == "2.4 MB"
    assert documents[0]["createdAt"].endswith("Z")


def test_unknown_record_is_404(client, auth_headers):
    response = client.post(
        f"{API}/admin/events/6f1c1c1e-58c4-4b7a-9a52-4b1f3c1d2e01",
        data=EVENT_FORM,
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_home_soul_count(client, auth_headers):
    assert client.get(f"{API}/home").json()["data"] == {"soulCount": 0}

    response = client.put(f"{API}/admin/soul-count", json={"count": 1532}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["count"] == 1532

    assert client.get(f"{API}/home").json()["data"] == {"soulCount": 1532}


def test_volunteer_application_reaches_the_dashboard(client, auth_headers):
    page = client.get(f"{API}/get-involved").json()["data"]
    assert "Choir Unit" in page["units"]

    response = client.post(
        f"{API}/get-involved/volunteers",
        data={"name": "A", "email": "a@x.com", "phone": "000", "unit": "Choir Unit"},
    )
    assert response.status_code == 201, response.text
    assert response.json()["data"]["values"] == {}
    assert response.json()["message"] == "Thank you for volunteering! We will contact you soon."

    volunteers = client.get(f"{API}/admin/volunteers", headers=auth_headers).json()["data"]
    assert [(v["name"], v["unit"], v["message"]) for v in volunteers] == [("A", "Choir Unit", None)]


def test_invalid_volunteer_application_echoes_values(client):
    response = client.post(
        f"{API}/get-involved/volunteers",
        data={"name": "A", "email": "a@x.com", "phone": "000", "unit": "Drama Unit"},
    )
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["message"] == "Something went wrong. Please try again."
    assert detail["values"]["unit"] == "Drama Unit"


def test_donate_online_is_not_implemented(client):
    response = client.post(f"{API}/get-involved/donate")
    assert response.status_code == 501
    assert response.json()["detail"]["message"] == "Payment gateway integration coming soon!"


def test_events_listing_filters_by_type(client, auth_headers):
    client.post(f"{API}/admin/events", data=EVENT_FORM, headers=auth_headers)
    client.post(f"{API}/admin/events", data={**EVENT_FORM, "title": "Retreat", "type": "past"}, headers=auth_headers)

    past = client.get(f"{API}/events", params={"type": "past"}).json()["data"]
    assert [event["title"] for event in past] == ["Retreat"]
    assert client.get(f"{API}/events", params={"type": "someday"}).status_code == 422


def test_prayer_request_reaches_the_dashboard(client, auth_headers):
    response = client.post(f"{API}/prayer-requests", data={"name": "B", "email": "b@x.com", "request": "Healing"})
    assert response.status_code == 201, response.text

    requests = client.get(f"{API}/admin/prayer-requests", headers=auth_headers).json()["data"]
    assert requests[0]["request"] == "Healing"
