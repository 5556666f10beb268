"""Tests for product API endpoints."""

from fastapi.testclient import TestClient

NEW_PRODUCT = {"name": "X", "description": "Y", "price": 19.99}


class TestCreateProduct:
    """Tests for POST /api/products."""

    def test_create_product(self, client: TestClient) -> None:
        response = client.post("/api/products", json=NEW_PRODUCT)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "X successfully created"
        assert data["product"] == {
            "id": 20,
            "name": "X",
            "description": "Y",
            "price": "19.99",
        }

    def test_created_product_is_readable(self, client: TestClient) -> None:
        product_id = client.post("/api/products", json=NEW_PRODUCT).json()["product"]["id"]

        response = client.get(f"/api/products/{product_id}")

        assert response.status_code == 200
        assert response.json()["price"] == "19.99"

    def test_client_id_is_ignored(self, client: TestClient) -> None:
        response = client.post("/api/products", json={**NEW_PRODUCT, "id": 3})

        assert response.status_code == 201
        assert response.json()["product"]["id"] == 20
        assert client.get("/api/products/3").json()["name"] == "Galaxy S24 Ultra"

    def test_whole_price_rendered_with_two_digits(self, client: TestClient) -> None:
        response = client.post("/api/products", json={**NEW_PRODUCT, "price": 1299})
        assert response.json()["product"]["price"] == "1299.00"

    def test_long_string_price_is_truncated(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            json={**NEW_PRODUCT, "price": "0.0199999999999999999999999999999"},
        )

        assert response.status_code == 201
        assert response.json()["product"]["price"] == "0.01"

    def test_ids_keep_increasing_after_delete(self, client: TestClient) -> None:
        first = client.post("/api/products", json=NEW_PRODUCT).json()["product"]["id"]
        client.delete(f"/api/products/{first}")
        second = client.post("/api/products", json=NEW_PRODUCT).json()["product"]["id"]

        assert second == first + 1

    def test_invalid_name_rejected(self, client: TestClient) -> None:
        response = client.post("/api/products", json={**NEW_PRODUCT, "name": "bad<name>"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"].startswith("Bad request, 'name' field required")

    def test_missing_name_rejected(self, client: TestClient) -> None:
        response = client.post("/api/products", json={"description": "Y", "price": 1})

        assert response.status_code == 400
        assert "'name' field required" in response.json()["message"]

    def test_comma_allowed_in_description_only(self, client: TestClient) -> None:
        ok = client.post("/api/products", json={**NEW_PRODUCT, "description": "Fast, light"})
        bad = client.post("/api/products", json={**NEW_PRODUCT, "name": "Fast, light"})

        assert ok.status_code == 201
        assert bad.status_code == 400

    def test_invalid_description_rejected(self, client: TestClient) -> None:
        response = client.post("/api/products", json={**NEW_PRODUCT, "description": "50% off!"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Bad request, 'description' field required")

    def test_non_positive_price_rejected(self, client: TestClient) -> None:
        for price in (0, -5):
            response = client.post("/api/products", json={**NEW_PRODUCT, "price": price})

            assert response.status_code == 400
            assert response.json()["message"] == (
                "Bad request, 'price' field required and should be larger than 0"
            )

    def test_malformed_json_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Bad request, failed to parse JSON"

    def test_rejected_create_does_not_consume_id(self, client: TestClient) -> None:
        client.post("/api/products", json={**NEW_PRODUCT, "price": 0})
        response = client.post("/api/products", json=NEW_PRODUCT)

        assert response.json()["product"]["id"] == 20


class TestGetProduct:
    """Tests for GET /api/products/{id}."""

    def test_get_product(self, client: TestClient) -> None:
        response = client.get("/api/products/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Galaxy Z Fold6",
            "description": "The ultimate foldable powered by Galaxy AI",
            "price": "1899.99",
        }

    def test_get_product_not_found(self, client: TestClient) -> None:
        response = client.get("/api/products/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["message"] == "Product with ID=999 not found"

    def test_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/products/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid Product ID"

    def test_id_out_of_int64_range(self, client: TestClient) -> None:
        response = client.get("/api/products/9223372036854775808")
        assert response.status_code == 400


class TestListAllProducts:
    """Tests for GET /api/products-all."""

    def test_list_all(self, client: TestClient) -> None:
        response = client.get("/api/products-all")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 19
        assert [p["id"] for p in data] == list(range(1, 20))
        assert data[2]["price"] == "1299.00"


class TestListProductsPaginated:
    """Tests for GET /api/products."""

    def test_defaults(self, client: TestClient) -> None:
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["totalReturnedData"] == 5
        assert data["totalLength"] == 19
        assert data["totalPages"] == 4
        assert [p["id"] for p in data["productsData"]] == [1, 2, 3, 4, 5]

    def test_last_partial_page(self, client: TestClient) -> None:
        data = client.get("/api/products?page=4&limit=5").json()

        assert data["totalReturnedData"] == 4
        assert [p["id"] for p in data["productsData"]] == [16, 17, 18, 19]

    def test_exact_multiple_last_page(self, client: TestClient) -> None:
        client.post("/api/products", json=NEW_PRODUCT)

        data = client.get("/api/products?page=4&limit=5").json()

        assert data["totalLength"] == 20
        assert data["totalReturnedData"] == 5
        assert data["totalPages"] == 4

    def test_page_out_of_range(self, client: TestClient) -> None:
        response = client.get("/api/products?page=5&limit=5")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "INVALID_PAGE"
        assert data["message"] == "Invalid page"

    def test_invalid_params_fall_back_to_defaults(self, client: TestClient) -> None:
        data = client.get("/api/products?page=-1&limit=abc").json()

        assert data["page"] == 1
        assert data["totalReturnedData"] == 5

    def test_custom_limit(self, client: TestClient) -> None:
        data = client.get("/api/products?page=2&limit=10").json()

        assert data["totalReturnedData"] == 9
        assert data["totalPages"] == 2

    def test_trailing_slash_served(self, client: TestClient) -> None:
        response = client.get("/api/products/", follow_redirects=False)

        assert response.status_code == 200
        assert response.json()["totalLength"] == 19


class TestUpdateProduct:
    """Tests for PUT /api/products/{id}."""

    def test_update_product(self, client: TestClient) -> None:
        response = client.put(
            "/api/products/2",
            json={"name": "Galaxy Z Flip6 SE", "description": "Updated", "price": 999.5},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Galaxy Z Flip6 SE successfully updated"
        assert data["product"] == {
            "id": 2,
            "name": "Galaxy Z Flip6 SE",
            "description": "Updated",
            "price": "999.50",
        }

    def test_update_preserves_position(self, client: TestClient) -> None:
        client.put("/api/products/2", json=NEW_PRODUCT)

        data = client.get("/api/products-all").json()
        assert data[1]["id"] == 2
        assert data[1]["name"] == "X"

    def test_update_not_found(self, client: TestClient) -> None:
        response = client.put("/api/products/999", json=NEW_PRODUCT)

        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"

    def test_update_missing_product_with_invalid_body(self, client: TestClient) -> None:
        """The product is looked up before the body is validated."""
        response = client.put("/api/products/999", json={**NEW_PRODUCT, "price": -1})

        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"

    def test_update_invalid_id(self, client: TestClient) -> None:
        response = client.put("/api/products/x1", json=NEW_PRODUCT)
        assert response.status_code == 400

    def test_update_invalid_body(self, client: TestClient) -> None:
        response = client.put("/api/products/1", json={**NEW_PRODUCT, "price": -1})

        assert response.status_code == 400
        assert client.get("/api/products/1").json()["price"] == "1899.99"


class TestDeleteProduct:
    """Tests for DELETE /api/products/{id}."""

    def test_delete_product(self, client: TestClient) -> None:
        response = client.delete("/api/products/1")

        assert response.status_code == 200
        assert response.json() == {"message": "Galaxy Z Fold6 successfully deleted"}
        assert client.get("/api/products/1").status_code == 404

    def test_delete_not_found_keeps_count(self, client: TestClient) -> None:
        response = client.delete("/api/products/999")

        assert response.status_code == 404
        assert response.json()["message"] == "Product with ID=999 not found"
        assert len(client.get("/api/products-all").json()) == 19

    def test_delete_parses_id_in_base_ten(self, client: TestClient) -> None:
        """'010' is product 10, exactly as for the other routes."""
        response = client.delete("/api/products/010")

        assert response.status_code == 200
        assert response.json()["message"] == "Galaxy Watch Ultra 3 successfully deleted"

    def test_delete_invalid_id(self, client: TestClient) -> None:
        response = client.delete("/api/products/0x10")
        assert response.status_code == 400
