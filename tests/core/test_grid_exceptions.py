"""
Tests for custom exception classes
"""

import unittest
from interpgrid.core import (
    FieldName,
    ValidationErrorType,
    GridDefinitionException,
    GridGeometryError,
    ValidationError,
    MissingFieldsError,
    InvalidGeometryError,
)
from interpgrid.components.geometry import GridGeometry


class TestGridGeometryError(unittest.TestCase):
    """Test GridGeometryError exception"""

    def test_exception_raised_for_inverted_bounds(self):
        """Test that construction raises with the failure detail"""
        with self.assertRaises(GridGeometryError) as context:
            GridGeometry(rows=1, cols=1, x_min=1, x_max=0, y_min=0, y_max=1)

        exc = context.exception
        self.assertIn("x_max", exc.detail)
        self.assertEqual(str(exc), exc.detail)
        self.assertIsInstance(exc, GridDefinitionException)


class TestMissingFieldsError(unittest.TestCase):
    """Test MissingFieldsError exception"""

    def test_attributes(self):
        exc = MissingFieldsError("All grid spacing fields are required.", [FieldName.Y_SPACING])

        self.assertEqual(exc.error_type, ValidationErrorType.MISSING_FIELDS)
        self.assertEqual(exc.title, "Error")
        self.assertEqual(exc.message, "All grid spacing fields are required.")
        self.assertIsNone(exc.detail)
        self.assertEqual(exc.fields, (FieldName.Y_SPACING,))
        self.assertEqual(str(exc), "All grid spacing fields are required.")

    def test_fields_default_empty(self):
        exc = MissingFieldsError("missing")
        self.assertEqual(exc.fields, ())


class TestInvalidGeometryError(unittest.TestCase):
    """Test InvalidGeometryError exception"""

    def test_default_message(self):
        exc = InvalidGeometryError("rows must be greater than 0, got 0")

        self.assertEqual(exc.error_type, ValidationErrorType.INVALID_GEOMETRY)
        self.assertEqual(exc.message, "Problem with grid geometry.")
        self.assertEqual(exc.detail, "rows must be greater than 0, got 0")
        self.assertIn("Problem with grid geometry.", str(exc))
        self.assertIn("rows must be greater than 0", str(exc))

    def test_hierarchy(self):
        exc = InvalidGeometryError("detail", message="Problem with grid spacing.")
        self.assertIsInstance(exc, ValidationError)
        self.assertIsInstance(exc, GridDefinitionException)
        self.assertEqual(exc.message, "Problem with grid spacing.")


if __name__ == "__main__":
    unittest.main()
