from shelfcheck.core.canonical import AuxiliaryData
from shelfcheck.core.validate import report_from_errors, validate_collections
from shelfcheck.core.validate.report import issue_code


def test_empty_collections_are_valid_unless_images_are_required() -> None:
    auxiliary = AuxiliaryData()

    assert validate_collections(auxiliary) == {}
    assert validate_collections(auxiliary, require_images=True) == {
        "images": "At least one product image is required"
    }


def test_counts_active_variants_without_images() -> None:
    auxiliary = AuxiliaryData(
        variants=[
            {"sku": "V-1", "image_url": "https://cdn.example.com/v1.jpg"},
            {"sku": "V-2"},
            {"sku": "V-3", "image_url": "  "},
            {"sku": "V-4", "is_active": False},
        ]
    )

    assert validate_collections(auxiliary) == {"variants": "2 active variant(s) missing images"}


def test_counts_incomplete_active_faqs() -> None:
    auxiliary = AuxiliaryData(
        faqs=[
            {"question": "Is it washable?", "answer": "Yes"},
            {"question": "Warranty?", "answer": " "},
            {"question": "", "answer": "Nobody asked", "is_active": False},
        ]
    )

    assert validate_collections(auxiliary) == {"faqs": "1 FAQ(s) incomplete"}


def test_report_from_errors_assigns_stable_codes() -> None:
    report = report_from_errors(
        {
            "title": "Product title is required",
            "compare_price": "MRP should be greater than or equal to selling price",
        },
        {"variants": "2 active variant(s) missing images"},
    )

    assert report.valid is False
    assert [(issue.field, issue.code) for issue in report.issues] == [
        ("title", "missing_title"),
        ("compare_price", "compare_price_below_base_price"),
        ("variants", "variants_missing_images"),
    ]
    assert report.errors()["title"] == "Product title is required"


def test_empty_report_is_valid() -> None:
    report = report_from_errors({})

    assert report.valid is True
    assert report.to_dict() == {"valid": True, "issues": []}


def test_unknown_messages_fall_back_to_field_code() -> None:
    assert issue_code("weight", "Weight looks wrong") == "invalid_weight"
