import pytest

from radix_sort import bench


class TestBench:
    def test_random_data_range(self):
        data = bench.random_data(200, 50)
        assert len(data) == 200
        assert all(0 <= v <= 50 for v in data)

    def test_random_data_negative(self):
        data = bench.random_data(200, 50, negative=True)
        assert all(-50 <= v <= 50 for v in data)

    def test_benchmark_verifies(self, capsys):
        timings = bench.benchmark([100, 500], max_value=10**6, negative=True, verify=True)
        assert len(timings) == 2
        out = capsys.readouterr().out
        assert "100  ->  time" in out
        assert "500  ->  time" in out

    def test_main_sample(self, capsys):
        assert bench.main(["--sample", "5", "--seed", "3", "--max-value", "99"]) == 0
        out = capsys.readouterr().out
        assert "Unsorted:" in out
        assert "Sorted:" in out

    def test_main_benchmark(self, capsys):
        assert bench.main(["--sizes", "50", "--verify", "--seed", "1"]) == 0
        assert "Sequential Radix Sort Performance" in capsys.readouterr().out

    def test_seed_is_reproducible(self):
        bench.random.seed(7)
        first = bench.random_data(10, 1000)
        bench.random.seed(7)
        assert bench.random_data(10, 1000) == first

    def test_rejects_negative_max_value(self):
        with pytest.raises(SystemExit):
            bench.parse_args(["--max-value", "-1"])
