import dataclasses
from decimal import Decimal

import pytest

from payment_reports.exceptions import InvalidConfigurationError
from payment_reports.schemas.payment import PaymentRecord
from payment_reports.schemas.report_config import (
    PageFormat,
    ReportConfig,
    ReportConfigBuilder,
    Theme,
)


class TestBuilderDefaults:

    def test_empty_builder_uses_defaults(self):
        config = ReportConfigBuilder().build()

        assert config.title == "Payment Report"
        assert config.include_logo is False
        assert config.include_payment_details is True
        assert config.include_user_info is True
        assert config.theme is Theme.LIGHT
        assert config.include_timestamp is True
        assert config.footer_message == ""
        assert config.format is PageFormat.A4

    def test_builder_defaults_match_dataclass_defaults(self):
        assert ReportConfigBuilder().build() == ReportConfig()


class TestBuilderSetters:

    def test_setters_return_same_builder(self):
        builder = ReportConfigBuilder()

        assert builder.with_logo(True) is builder
        assert builder.with_title("Receipt") is builder
        assert builder.with_payment_details(False) is builder
        assert builder.with_user_info(False) is builder
        assert builder.with_theme(Theme.DARK) is builder
        assert builder.with_timestamp(False) is builder
        assert builder.with_footer_message("Thanks") is builder
        assert builder.with_format(PageFormat.LETTER) is builder

    def test_each_setter_changes_only_its_field(self):
        config = ReportConfigBuilder().with_footer_message("Thank you").build()

        assert config.footer_message == "Thank you"
        assert config == dataclasses.replace(ReportConfig(), footer_message="Thank you")

    def test_full_chain(self):
        config = (
            ReportConfigBuilder()
            .with_logo(True)
            .with_title("Receipt")
            .with_payment_details(False)
            .with_user_info(False)
            .with_theme("DARK")
            .with_timestamp(False)
            .with_footer_message("Thanks")
            .with_format("LETTER")
            .build()
        )

        assert config == ReportConfig(
            include_logo=True,
            title="Receipt",
            include_payment_details=False,
            include_user_info=False,
            theme=Theme.DARK,
            include_timestamp=False,
            footer_message="Thanks",
            format=PageFormat.LETTER,
        )

    def test_none_footer_becomes_empty(self):
        assert ReportConfigBuilder().with_footer_message(None).build().footer_message == ""


class TestEnumCoercion:

    def test_string_names_are_coerced(self):
        config = ReportConfigBuilder().with_theme(" DARK ").with_format("LETTER").build()
        assert config.theme is Theme.DARK
        assert config.format is PageFormat.LETTER

    def test_unknown_theme_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfigBuilder().with_theme("PURPLE")

        assert exc_info.value.field == "theme"
        assert "PURPLE" in str(exc_info.value)
        assert "LIGHT" in str(exc_info.value)

    def test_unknown_format_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfigBuilder().with_format("LEGAL")

        assert exc_info.value.field == "format"

    def test_names_are_case_sensitive(self):
        with pytest.raises(InvalidConfigurationError):
            ReportConfigBuilder().with_theme("dark")

    def test_invalid_configuration_is_a_value_error(self):
        with pytest.raises(ValueError):
            ReportConfigBuilder().with_format(42)


class TestImmutability:

    def test_config_fields_cannot_be_assigned(self):
        config = ReportConfigBuilder().build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.title = "Changed"

    def test_builder_reuse_does_not_alter_built_configs(self):
        builder = ReportConfigBuilder().with_title("First")
        first = builder.build()
        second = builder.with_title("Second").with_theme(Theme.DARK).build()

        assert first.title == "First"
        assert first.theme is Theme.LIGHT
        assert second.title == "Second"
        assert first is not second

    def test_describe_lists_every_option(self):
        text = ReportConfigBuilder().with_title("Receipt").build().describe()

        assert text.startswith("ReportConfig(")
        for name in ("include_logo", "title='Receipt'", "theme=LIGHT", "format=A4", "footer_message=''"):
            assert name in text


class TestPaymentRecord:

    def test_float_amount_keeps_its_decimal_digits(self):
        record = PaymentRecord.create("TX1", 99.9, "CARD", "Alice")
        assert record.amount == Decimal("99.9")

    @pytest.mark.parametrize("amount", [0, -1, "-0.01", float("nan")])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValueError):
            PaymentRecord.create("TX1", amount, "CARD", "Alice")

    @pytest.mark.parametrize("field", ["transaction_id", "payment_method", "customer_name"])
    def test_blank_strings_rejected(self, field):
        values = {"transaction_id": "TX1", "payment_method": "CARD", "customer_name": "Alice"}
        values[field] = "  "
        with pytest.raises(ValueError):
            PaymentRecord.create(amount=10, **values)

    def test_record_is_frozen(self):
        record = PaymentRecord.create("TX1", 10, "CARD", "Alice")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.amount = Decimal("1")
