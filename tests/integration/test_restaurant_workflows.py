"""End-to-end restaurant workflows through the HTTP API."""

from crudyrestaurants.extensions import db


def _created_id(response):
    assert response.status_code == 201, response.get_json()
    return int(response.headers["Location"].rsplit("/", 1)[1])


def test_full_lifecycle(client, payments):
    """Create, read, search, replace, merge and delete one restaurant."""
    cash = payments["Cash"].id
    card = payments["Credit Card"].id

    restaurant_id = _created_id(
        client.post(
            "/restaurant",
            json={
                "name": "Number 1 Eats",
                "address": "565 Side Avenue",
                "city": "Village",
                "state": "ST",
                "telephone": "555-123-1555",
                "seat_capacity": 15,
                "menus": [{"dish": "Pizza", "price": "15.15"}],
                "payments": [{"id": cash}],
            },
        )
    )

    assert client.get("/restaurant/name/number%201%20eats").get_json()["id"] == restaurant_id
    assert [r["id"] for r in client.get("/restaurant/likedish/PIZ").get_json()] == [restaurant_id]
    assert [r["id"] for r in client.get("/restaurant/state/st").get_json()] == [restaurant_id]

    # Full replace drops everything the body does not carry
    response = client.put(
        f"/restaurant/{restaurant_id}",
        json={"name": "Number 2 Eats", "menus": [{"dish": "Calzone", "price": "11.00"}], "payments": [{"id": card}]},
    )
    assert response.status_code == 200
    db.session.expire_all()
    replaced = client.get(f"/restaurant/{restaurant_id}").get_json()
    assert replaced["name"] == "Number 2 Eats"
    assert replaced["city"] is None
    assert replaced["seat_capacity"] is None
    assert [m["dish"] for m in replaced["menus"]] == ["Calzone"]
    assert [p["id"] for p in replaced["payments"]] == [card]

    # Partial merge keeps what the body leaves out
    response = client.patch(f"/restaurant/{restaurant_id}", json={"city": "Village", "seat_capacity": 20})
    assert response.status_code == 200
    db.session.expire_all()
    merged = client.get(f"/restaurant/{restaurant_id}").get_json()
    assert merged["name"] == "Number 2 Eats"
    assert merged["city"] == "Village"
    assert merged["seat_capacity"] == 20
    assert [m["dish"] for m in merged["menus"]] == ["Calzone"]

    assert client.delete(f"/restaurant/{restaurant_id}").status_code == 200
    assert client.get(f"/restaurant/{restaurant_id}").status_code == 404
    assert client.delete(f"/restaurant/{restaurant_id}").status_code == 404
    assert client.get("/menucounts").get_json() == []


def test_failed_write_leaves_no_trace(client, payments, sample_restaurant):
    before = client.get(f"/restaurant/{sample_restaurant.id}").get_json()

    response = client.post(
        "/restaurant",
        json={"name": "Phantom", "menus": [{"dish": "Air"}], "payments": [{"id": payments["Cash"].id}, {"id": 9999}]},
    )
    assert response.status_code == 404

    response = client.patch(f"/restaurant/{sample_restaurant.id}", json={"name": "Changed", "payments": [{"id": 9999}]})
    assert response.status_code == 404

    db.session.expire_all()
    assert client.get("/restaurant/likename/phantom").get_json() == []
    assert client.get(f"/restaurant/{sample_restaurant.id}").get_json() == before
    assert [row["count"] for row in client.get("/menucounts").get_json()] == [2]


def test_search_by_dish_returns_each_restaurant_once(client, service):
    service.create(
        {"name": "Cake Shop", "menus": [{"dish": "Carrot Cake"}, {"dish": "Cheesecake"}, {"dish": "Cupcake"}]}
    )
    service.create({"name": "Salad Bar", "menus": [{"dish": "Greens"}]})

    names = [r["name"] for r in client.get("/restaurant/likedish/cake").get_json()]

    assert names == ["Cake Shop"]


def test_shared_payment_outlives_restaurants(client, service, payments):
    cash = payments["Cash"].id
    first = _created_id(client.post("/restaurant", json={"name": "First", "payments": [{"id": cash}]}))
    second = _created_id(client.post("/restaurant", json={"name": "Second", "payments": [{"id": cash}]}))

    client.delete(f"/restaurant/{first}")

    db.session.expire_all()
    assert [p["id"] for p in client.get(f"/restaurant/{second}").get_json()["payments"]] == [cash]
    assert any(p.id == cash for p in service.list_payments())
