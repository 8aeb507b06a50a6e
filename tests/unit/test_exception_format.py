from paylinks.app_setup.exceptions import format_validation_errors


def test_one_entry_per_field_without_body_prefix():
    errors = [
        {"loc": ("body", "unitAmount"), "msg": "Input should be greater than 0"},
        {"loc": ("body", "unitAmount"), "msg": "second message ignored"},
        {"loc": ("body", "currency"), "msg": "Field required"},
    ]
    assert format_validation_errors(errors) == [
        {"field": "unitAmount", "message": "Input should be greater than 0"},
        {"field": "currency", "message": "Field required"},
    ]


def test_whole_body_error_keeps_body_as_field():
    errors = [{"loc": ("body",), "msg": "Field required"}]
    assert format_validation_errors(errors) == [{"field": "body", "message": "Field required"}]
