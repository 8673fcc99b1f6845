"""Tests for the single-snapshot scoring tools."""

import json

from stock_quant.tools import score_quote, score_snapshot

RESPONSE_KEYS = {
    "meta",
    "ticker",
    "company_name",
    "analysis",
    "factors",
    "data_coverage",
    "insufficient_data",
    "fingerprint",
}


class TestScoreSnapshot:
    """Tests for score_snapshot."""

    def test_response_schema(self, reference_snapshot) -> None:
        result = score_snapshot(reference_snapshot.to_dict())

        assert set(result) == RESPONSE_KEYS
        assert result["meta"]["tool"] == "score_snapshot"
        assert "duration_ms" in result["meta"]
        assert set(result["factors"]) == {"value", "growth", "quality", "momentum", "risk"}

    def test_reference_scores(self, reference_snapshot) -> None:
        result = score_snapshot(reference_snapshot.to_dict())
        analysis = result["analysis"]

        assert result["ticker"] == "REF"
        assert analysis["rating"] == "HOLD"
        assert analysis["healthScore"] == 56
        assert analysis["balanceScore"] == 58
        assert analysis["conviction"] == 41
        assert result["factors"]["value"] == 85
        assert result["insufficient_data"] is False

    def test_camel_case_input(self) -> None:
        result = score_snapshot({"ticker": "abc", "peRatio": 15, "companyName": "Abc Co"})

        assert result["ticker"] == "ABC"
        assert result["company_name"] == "Abc Co"
        assert result["analysis"]["valuationScore"] == 80

    def test_empty_snapshot_flags_insufficient_data(self) -> None:
        result = score_snapshot({})

        assert result["insufficient_data"] is True
        assert result["analysis"]["rating"] == "HOLD"
        assert result["analysis"]["keyRisks"]

    def test_same_input_same_fingerprint(self, reference_snapshot) -> None:
        first = score_snapshot(reference_snapshot.to_dict())
        second = score_snapshot(reference_snapshot.to_dict())
        assert first["fingerprint"] == second["fingerprint"]

    def test_json_serializable(self, strong_snapshot) -> None:
        json.dumps(score_snapshot(strong_snapshot.to_dict()))

    def test_rejects_non_object(self) -> None:
        result = score_snapshot(["AAPL"])

        assert result["error"] is True
        assert result["error_type"] == "invalid_input"
        assert result["meta"]["tool"] == "score_snapshot"


class TestScoreQuote:
    """Tests for score_quote."""

    def test_scores_quote(self) -> None:
        result = score_quote(
            {
                "symbol": "acme",
                "longName": "Acme Corp",
                "regularMarketPrice": 110.0,
                "regularMarketPreviousClose": 100.0,
                "trailingPE": 15.0,
            },
            financial_data={"profitMargins": 0.35, "returnOnEquity": 0.35},
        )

        assert set(result) == RESPONSE_KEYS
        assert result["meta"]["tool"] == "score_quote"
        assert result["ticker"] == "ACME"
        assert result["analysis"]["valuationScore"] == 80
        assert result["analysis"]["profitabilityScore"] == 95
        assert result["data_coverage"]["has_profitability"] is True

    def test_huge_integer_is_treated_as_missing(self) -> None:
        result = score_quote({"symbol": "BIG", "regularMarketPrice": 100.0, "marketCap": 10**400})

        assert "error" not in result
        assert result["ticker"] == "BIG"
        assert result["analysis"]["rating"] == "HOLD"
        assert result["data_coverage"]["groups"]["risk"]["present"] == 0

    def test_rejects_non_object_quote(self) -> None:
        assert score_quote("AAPL")["error_type"] == "invalid_input"

    def test_rejects_non_object_financial_data(self) -> None:
        result = score_quote({"symbol": "AAPL"}, financial_data=[1, 2])
        assert result["error"] is True
