import pytest

from weirdbites.core import features as features_module


@pytest.mark.asyncio
async def test_home_page_shows_featured(client, sample_products):
    response = await client.get("/")

    assert response.status_code == 200
    assert "Featured Snacks" in response.text
    assert "Durian Chips" in response.text
    assert "Black Garlic Chocolate" not in response.text


@pytest.mark.asyncio
async def test_products_page(client, sample_products):
    response = await client.get("/products")

    assert response.status_code == 200
    assert response.text.count('data-testid="product-card"') == 4
    assert "Only 3 left" in response.text
    assert "Out of stock" in response.text
    assert "Snacks (2)" in response.text


@pytest.mark.asyncio
async def test_products_page_category_filter(client, sample_products):
    response = await client.get("/products", params={"category": "Snacks"})

    assert "Durian Chips" in response.text
    assert "Wasabi Peas" in response.text
    assert "Black Garlic Chocolate" not in response.text


@pytest.mark.asyncio
async def test_products_page_ignores_category_when_filtering_disabled(client, sample_products, monkeypatch):
    monkeypatch.setitem(features_module.features, "productFiltering", False)

    response = await client.get("/products", params={"category": "Snacks"})

    assert response.text.count('data-testid="product-card"') == 4
    assert "All Products</a>" not in response.text


@pytest.mark.asyncio
async def test_products_page_pagination(client, sample_products):
    response = await client.get("/products", params={"page": "2", "pageSize": "3"})

    assert response.text.count('data-testid="product-card"') == 1
    assert "Wasabi Peas" in response.text
    assert 'aria-label="Previous page"' in response.text


@pytest.mark.asyncio
async def test_products_page_invalid_params_fall_back(client, sample_products):
    response = await client.get("/products", params={"page": "-4", "pageSize": "500"})

    assert response.status_code == 200
    assert response.text.count('data-testid="product-card"') == 4


@pytest.mark.asyncio
async def test_product_detail(client, sample_products):
    response = await client.get("/products/p-garlic")

    assert response.status_code == 200
    assert "Black Garlic Chocolate" in response.text
    assert "$15.50" in response.text
    assert "Add Black Garlic Chocolate to cart" in response.text


@pytest.mark.asyncio
async def test_product_detail_out_of_stock_button(client, sample_products):
    response = await client.get("/products/p-mango")

    assert "Add Chili Mango Gummies to cart - out of stock" in response.text


@pytest.mark.asyncio
async def test_product_detail_coming_soon_when_cart_disabled(client, sample_products, monkeypatch):
    monkeypatch.setitem(features_module.features, "shoppingCart", False)

    response = await client.get("/products/p-durian")

    assert "Coming Soon" in response.text


@pytest.mark.asyncio
async def test_product_detail_not_found(client, sample_products):
    response = await client.get("/products/missing")

    assert response.status_code == 404
    assert "Product not found" in response.text


@pytest.mark.asyncio
async def test_unknown_page_renders_html_404(client):
    response = await client.get("/no-such-page")

    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "Page not found" in response.text


@pytest.mark.asyncio
async def test_empty_cart_page(client):
    response = await client.get("/cart")

    assert response.status_code == 200
    assert "Your cart is empty" in response.text


@pytest.mark.asyncio
async def test_add_to_cart_form_flashes_toast(client, sample_products):
    response = await client.post("/cart/add", data={"product_id": "p-durian", "next": "/products/p-durian"})

    assert response.status_code == 303
    assert response.headers["location"] == "/products/p-durian"

    page = await client.get("/products/p-durian")
    assert "Durian Chips added to cart" in page.text
    assert 'data-testid="cart-count">1<' in page.text

    # Toast is shown once
    page = await client.get("/products/p-durian")
    assert "Durian Chips added to cart" not in page.text


@pytest.mark.asyncio
async def test_add_to_cart_form_rejects_offsite_redirect(client, sample_products):
    response = await client.post("/cart/add", data={"product_id": "p-durian", "next": "//evil.example"})

    assert response.headers["location"] == "/cart"


@pytest.mark.asyncio
async def test_add_out_of_stock_form_shows_error(client, sample_products):
    response = await client.post("/cart/add", data={"product_id": "p-mango"})
    assert response.status_code == 303

    page = await client.get("/cart")
    assert "Product is out of stock" in page.text
    assert "Your cart is empty" in page.text


@pytest.mark.asyncio
async def test_cart_page_lists_items_and_subtotal(client, sample_products):
    await client.post("/cart/add", data={"product_id": "p-durian"})
    await client.post("/cart/add", data={"product_id": "p-durian"})
    await client.post("/cart/add", data={"product_id": "p-wasabi"})

    page = await client.get("/cart")

    assert page.text.count('data-testid="cart-item"') == 2
    assert "$32.48" in page.text
    assert 'data-testid="cart-count">3<' in page.text


@pytest.mark.asyncio
async def test_update_and_remove_forms(client, sample_products):
    await client.post("/cart/add", data={"product_id": "p-durian"})
    await client.post("/cart/add", data={"product_id": "p-wasabi"})

    response = await client.post("/cart/update", data={"product_id": "p-durian", "quantity": "3"})
    assert response.status_code == 303
    response = await client.post("/cart/remove", data={"product_id": "p-wasabi"})
    assert response.status_code == 303

    cart = (await client.get("/api/cart")).json()
    assert [(line["productId"], line["quantity"]) for line in cart["lines"]] == [("p-durian", 3)]


@pytest.mark.asyncio
async def test_clear_form(client, sample_products):
    await client.post("/cart/add", data={"product_id": "p-durian"})

    response = await client.post("/cart/clear")
    assert response.status_code == 303

    page = await client.get("/cart")
    assert "Your cart is empty" in page.text
