"""Tests for the JSON tool functions."""

import json

from subnetdrill.tools import check_subnet_answer, convert_address, generate_vlsm_exercise


class TestGenerateVlsmExercise:
    """Tests for generate_vlsm_exercise."""

    def test_seeded(self):
        first = json.loads(generate_vlsm_exercise("hard", "99"))
        second = json.loads(generate_vlsm_exercise("hard", "99"))
        assert first == second
        assert first["difficulty"] == "hard"
        assert len(first["subnets"]) == len(first["hosts_per_subnet"])
        assert first["question"].startswith("Assigned block: ")

    def test_difficulty_case_insensitive(self):
        data = json.loads(generate_vlsm_exercise(" Easy ", ""))
        assert data["difficulty"] == "easy"
        assert len(data["subnets"]) == 1

    def test_unknown_difficulty(self):
        assert "error" in json.loads(generate_vlsm_exercise("expert"))

    def test_bad_seed(self):
        assert "error" in json.loads(generate_vlsm_exercise("easy", "abc"))


class TestCheckSubnetAnswer:
    """Tests for check_subnet_answer."""

    def test_correct(self):
        data = json.loads(check_subnet_answer(
            "192.168.1.0/26", "255.255.255.192", "/26", "192.168.1.0",
            "192.168.1.63", "192.168.1.1", "192.168.1.62"
        ))
        assert data["correct"] is True
        assert data["expected"]["broadcast"] == "192.168.1.63"

    def test_incorrect(self):
        data = json.loads(check_subnet_answer(
            "192.168.1.0/26", "255.255.255.192", "/26", "192.168.1.0",
            "192.168.1.64", "192.168.1.1", "192.168.1.62"
        ))
        assert data["correct"] is False

    def test_invalid_subnet(self):
        data = json.loads(check_subnet_answer("192.168.1.5/26", "", "", "", "", "", ""))
        assert "error" in data


class TestConvertAddress:
    """Tests for convert_address."""

    def test_decimal(self):
        data = json.loads(convert_address("192.168.1.10"))
        assert data == {
            "decimal": "192.168.1.10",
            "binary": "11000000.10101000.00000001.00001010",
        }

    def test_binary(self):
        data = json.loads(convert_address("11111111.11111111.11111111.11100000"))
        assert data["decimal"] == "255.255.255.224"

    def test_invalid(self):
        assert "error" in json.loads(convert_address("10.0.0"))
