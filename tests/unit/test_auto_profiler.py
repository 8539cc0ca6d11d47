"""
AutoAxis - Unit Tests for the Agent Framework and the Auto Profiler
"""

import json

import numpy as np
import pandas as pd
import pytest
from loguru import logger

from agents.auto_profiler import AutoProfiler, ProfileOptions
from core.base_agent import AgentResult, BaseAgent
from scales.numeric_scale import NumericScale


class _Echo(BaseAgent):
    def __init__(self, payload=None):
        super().__init__(name="echo")
        self.payload = payload

    def execute(self, **kwargs):
        if self.payload == "raise":
            raise RuntimeError("boom")
        if self.payload == "bad":
            return {"not": "a result"}
        result = AgentResult(agent_name=self.name)
        result.add_data(**kwargs)
        return result


class TestBaseAgent:
    """Tests for the agent lifecycle"""

    def test_success(self):
        """Results carry data and timing"""
        result = _Echo().run(x=1)
        assert result.is_success()
        assert result.data == {"x": 1}
        assert result.started_at is not None
        assert result.execution_time >= 0

    def test_failure_becomes_result(self):
        """Exceptions are returned as failed results"""
        result = _Echo("raise").run()
        assert result.is_failed()
        assert result.errors == ["RuntimeError: boom"]

    def test_invalid_return_type(self):
        """execute() must return an AgentResult"""
        result = _Echo("bad").run()
        assert result.is_failed()
        assert "AgentError" in result.errors[0]

    def test_warning_makes_partial(self):
        """A warning downgrades success to partial"""
        result = AgentResult(agent_name="a")
        result.add_warning("careful")
        assert result.is_partial()

    def test_warning_never_upgrades_failure(self):
        """Status only degrades"""
        result = AgentResult(agent_name="a")
        result.add_error("broken")
        result.add_warning("careful")
        assert result.is_failed()

    def test_agent_logger_is_bound(self):
        """Agent records carry the agent name"""
        seen = []
        sink = logger.add(lambda m: seen.append(m.record["extra"]), level="DEBUG")
        try:
            _Echo().run(x=1)
        finally:
            logger.remove(sink)
        assert any(extra.get("agent") == "echo" for extra in seen)

    def test_last_result_kept(self):
        """The most recent result is available after run"""
        agent = _Echo()
        result = agent.run(x=2)
        assert agent.get_last_result() is result

    def test_to_json_handles_numpy(self):
        """numpy values serialize"""
        result = AgentResult(agent_name="a")
        result.add_data(n=np.int64(3), arr=np.array([1.0, 2.0]))
        payload = json.loads(result.to_json())
        assert payload["data"] == {"n": 3, "arr": [1.0, 2.0]}


class TestProfileOptions:
    """Tests for option resolution"""

    def test_defaults_from_settings(self, test_settings):
        """Unset options come from settings"""
        options = ProfileOptions.from_settings()
        assert options.nice is test_settings.SCALE_NICE
        assert options.seed == 42

    def test_overrides(self, test_settings):
        """Explicit values win, None means default"""
        options = ProfileOptions.from_settings(nice=False, seed=None)
        assert options.nice is False
        assert options.seed == 42


class TestAutoProfiler:
    """Tests for AutoProfiler"""

    def test_profiles_every_column(self, sample_df, test_settings):
        """Kinds are inferred per column"""
        result = AutoProfiler().run(data=sample_df)
        assert result.is_success()

        columns = result.data["columns"]
        assert columns["amount"]["kind"] == "numeric"
        assert columns["year"]["kind"] == "date"
        assert columns["label"]["kind"] == "raw"
        assert columns["when"]["kind"] == "date"
        assert result.data["summary"]["n_columns"] == 4

    def test_numeric_column_has_scale(self, sample_df, test_settings):
        """Numeric columns get transform, bins and a scale"""
        result = AutoProfiler().run(data=sample_df, columns=["amount"])
        profile = result.data["columns"]["amount"]

        assert profile["transform"] in ("linear", "log", "root")
        assert profile["optimal_bin_count"] >= 2
        assert isinstance(profile["scale"], NumericScale)
        assert profile["scale"].min <= sample_df["amount"].min()
        assert profile["scale"].max >= sample_df["amount"].max()

    def test_year_column_gets_date_scale(self, sample_df, test_settings):
        """Year text becomes a yearly date axis"""
        result = AutoProfiler().run(data=sample_df, columns=["year"])
        scale = result.data["columns"]["year"]["scale"]
        assert scale.type == "date"
        assert all(d.month == 1 and d.day == 1 for d in scale.division_dates())

    def test_text_column_has_no_scale(self, sample_df, test_settings):
        """Categorical columns are reported without a scale"""
        result = AutoProfiler().run(data=sample_df, columns=["label"])
        assert result.data["columns"]["label"]["scale"] is None

    def test_empty_numeric_column_is_a_warning(self, test_settings):
        """Column failures do not fail the run"""
        df = pd.DataFrame({"empty": [np.nan, np.nan], "ok": [1.0, 2.0]})
        result = AutoProfiler().run(data=df)

        assert result.is_partial()
        assert "empty" in result.warnings[0]
        assert result.data["columns"]["ok"]["scale"] is not None

    def test_non_dataframe_fails(self):
        """Input must be a DataFrame"""
        result = AutoProfiler().run(data=[1, 2, 3])
        assert result.is_failed()
        assert "DataFrame" in result.errors[0]

    def test_unknown_column_fails(self, sample_df):
        """Requested columns must exist"""
        result = AutoProfiler().run(data=sample_df, columns=["nope"])
        assert result.is_failed()

    def test_result_serializes(self, sample_df, test_settings):
        """The whole profile can be dumped to JSON"""
        result = AutoProfiler().run(data=sample_df)
        payload = json.loads(result.to_json())
        assert set(payload["data"]["columns"]) == {"amount", "year", "label", "when"}

    def test_seed_recorded(self, sample_df, test_settings):
        """The sampling seed is part of the metadata"""
        result = AutoProfiler().run(data=sample_df, seed=7)
        assert result.metadata["seed"] == 7
