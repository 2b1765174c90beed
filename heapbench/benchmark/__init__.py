from .runner import OracleResult, generate_random_list, run_benchmarks, run_oracle_check

__all__ = ["OracleResult", "generate_random_list", "run_benchmarks", "run_oracle_check"]
