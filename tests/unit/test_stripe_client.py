import pytest
import stripe

from paylinks.errors import ProviderError
from paylinks.payments.stripe_client import StripeProvider, build_providers


class _Recorder:
    def __init__(self, result=None, error=None):
        self.result = result if result is not None else {"id": "obj_1"}
        self.error = error
        self.args = None
        self.kwargs = None

    def __call__(self, *args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.result


def test_key_is_passed_per_call_not_globally(monkeypatch):
    rec = _Recorder({"id": "prod_1"})
    monkeypatch.setattr(stripe.Product, "create", rec)
    monkeypatch.setattr(stripe, "api_key", None)

    provider = StripeProvider(api_key="sk_test_abc", mode="test", api_version=None)
    product = provider.create_product("Mug")

    assert product["id"] == "prod_1"
    assert rec.kwargs == {"name": "Mug", "api_key": "sk_test_abc"}
    assert stripe.api_key is None


def test_api_version_is_forwarded_when_pinned(monkeypatch):
    rec = _Recorder()
    monkeypatch.setattr(stripe.Product, "retrieve", rec)

    StripeProvider(api_key="sk_live_x", mode="live", api_version="2024-06-20").retrieve_product("prod_9")

    assert rec.args == ("prod_9",)
    assert rec.kwargs["stripe_version"] == "2024-06-20"


def test_payment_link_options(monkeypatch):
    rec = _Recorder({"id": "plink_1", "url": "https://buy.stripe.com/1"})
    monkeypatch.setattr(stripe.PaymentLink, "create", rec)
    provider = StripeProvider(api_key="sk_test_abc", mode="test", api_version=None)

    provider.create_payment_link(line_items=[{"price": "price_1", "quantity": 1}])
    assert rec.kwargs["automatic_tax"] == {"enabled": True}
    assert rec.kwargs["phone_number_collection"] == {"enabled": True}

    provider.create_payment_link(line_items=[{"price": "price_1", "quantity": 1}], automatic_tax=False, collect_phone=False)
    assert "automatic_tax" not in rec.kwargs
    assert "phone_number_collection" not in rec.kwargs


def test_price_params(monkeypatch):
    rec = _Recorder({"id": "price_1"})
    monkeypatch.setattr(stripe.Price, "create", rec)

    StripeProvider(api_key="k_x_y", mode="live", api_version=None).create_price(
        product_id="prod_1", unit_amount=500, currency="usd"
    )
    assert rec.kwargs["product"] == "prod_1"
    assert rec.kwargs["unit_amount"] == 500
    assert rec.kwargs["tax_behavior"] == "exclusive"


def test_session_lookup_params(monkeypatch):
    listing = _Recorder({"data": []})
    retrieve = _Recorder({"id": "cs_1"})
    monkeypatch.setattr(stripe.checkout.Session, "list", listing)
    monkeypatch.setattr(stripe.checkout.Session, "retrieve", retrieve)
    provider = StripeProvider(api_key="sk_test_abc", mode="test", api_version=None)

    provider.list_checkout_sessions(payment_intent="pi_1")
    provider.retrieve_checkout_session("cs_1", expand=["line_items"])

    assert listing.kwargs["payment_intent"] == "pi_1"
    assert listing.kwargs["limit"] == 1
    assert retrieve.args == ("cs_1",)
    assert retrieve.kwargs["expand"] == ["line_items"]


def test_stripe_error_becomes_provider_error(monkeypatch):
    error = stripe.InvalidRequestError("No such product: 'prod_x'", param="product")
    monkeypatch.setattr(stripe.Price, "create", _Recorder(error=error))
    provider = StripeProvider(api_key="sk_test_abc", mode="test", api_version=None)

    with pytest.raises(ProviderError) as exc:
        provider.create_price(product_id="prod_x", unit_amount=100, currency="usd")

    assert exc.value.message == "No such product: 'prod_x'"
    assert exc.value.operation == "create_price"
    assert exc.value.mode == "test"
    assert exc.value.__cause__ is error


def test_build_providers_one_per_mode():
    providers = build_providers({"live": "sk_live_1", "test": ""})
    assert set(providers) == {"live", "test"}
    assert providers["live"].configured is True
    assert providers["test"].configured is False
    assert providers["test"].mode == "test"


def test_sdk_list_object_is_returned_as_plain_dict(monkeypatch):
    listing = stripe.ListObject.construct_from(
        {
            "object": "list",
            "data": [
                {
                    "id": "pi_1",
                    "object": "payment_intent",
                    "status": "succeeded",
                    "latest_charge": {"id": "ch_1", "object": "charge", "billing_details": {"email": "a@b.com"}},
                }
            ],
        },
        "sk_test_abc",
    )
    rec = _Recorder(listing)
    monkeypatch.setattr(stripe.PaymentIntent, "list", rec)

    provider = StripeProvider(api_key="sk_test_abc", mode="test", api_version=None)
    intents = provider.list_payment_intents(limit=100, expand=["data.latest_charge"])

    assert type(intents) is dict
    intent = intents["data"][0]
    assert type(intent) is dict
    assert type(intent["latest_charge"]) is dict
    assert intent.get("latest_charge").get("billing_details") == {"email": "a@b.com"}
    assert rec.kwargs["expand"] == ["data.latest_charge"]
