"""Tests for fancylists utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from fancylists.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "fancylists.mymodule"

    def test_logger_with_package_prefix(self) -> None:
        from fancylists.utils.logger import get_logger

        logger = get_logger("fancylists.rule")
        assert logger.name == "fancylists.rule"

    def test_logger_name_starting_with_package_not_submodule(self) -> None:
        from fancylists.utils.logger import get_logger

        logger = get_logger("fancylists_other")
        assert logger.name == "fancylists.fancylists_other"

    def test_logger_exact_package_name(self) -> None:
        from fancylists.utils.logger import get_logger

        logger = get_logger("fancylists")
        assert logger.name == "fancylists"

    def test_rule_logs_assembled_lists(self, caplog) -> None:
        import logging

        from fancylists import render

        with caplog.at_level(logging.DEBUG, logger="fancylists"):
            render("i. one\nii. two\n")
        assert any(
            "LOWER_ROMAN" in record.getMessage() and "2 item(s)" in record.getMessage()
            for record in caplog.records
        )
