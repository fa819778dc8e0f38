"""Unit tests for LimelightConfig."""

import unittest

from pydantic import ValidationError

from limelight_nt.core.config import DEFAULT_TABLE_NAME, LimelightConfig


class LimelightConfigTests(unittest.TestCase):
    """Validate defaults, normalisation and server resolution."""

    def test_defaults(self) -> None:
        config = LimelightConfig()
        self.assertEqual(config.table_name, DEFAULT_TABLE_NAME)
        self.assertIsNone(config.resolved_server())
        self.assertFalse(config.legacy_cam_mode)

    def test_blank_table_name_falls_back_to_default(self) -> None:
        self.assertEqual(LimelightConfig(table_name="   ").table_name, "limelight")
        self.assertEqual(LimelightConfig(table_name=" limelight-a ").table_name, "limelight-a")

    def test_team_number_resolves_server(self) -> None:
        config = LimelightConfig(team_number=2429)
        self.assertEqual(config.resolved_server(), "roborio-2429-frc.local")

    def test_explicit_server_wins(self) -> None:
        config = LimelightConfig(server="10.24.29.2", team_number=2429)
        self.assertEqual(config.resolved_server(), "10.24.29.2")

    def test_blank_server_is_ignored(self) -> None:
        self.assertIsNone(LimelightConfig(server="  ").server)

    def test_team_number_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            LimelightConfig(team_number=0)

    def test_assignment_is_validated(self) -> None:
        config = LimelightConfig()
        with self.assertRaises(ValidationError):
            config.team_number = 30000


if __name__ == "__main__":
    unittest.main()
