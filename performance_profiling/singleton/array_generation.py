import os
import numpy as np

from constants.params import RANDOM_SEED


def generate_sample(nums_count, random_state_seed=None):
    """
    Generates a shuffled sample where every value in [0, nums_count) appears
    twice except one, which appears once.

    Returns:
        (sample, once): the sample as a list of ints and the value that appears
        once, or ([], None) when nums_count is 0.
    """
    rng = np.random.RandomState(random_state_seed)
    nums = np.tile(np.arange(nums_count, dtype=np.int64), 2)
    rng.shuffle(nums)
    if nums.size == 0:
        return [], None
    once = int(nums[-1])
    return nums[:-1].tolist(), once


def generate_samples(nums_count, num_samples=10, random_state_seed=RANDOM_SEED):
    """Generates several samples with consecutive seeds."""
    return [generate_sample(nums_count, random_state_seed + i) for i in range(num_samples)]


def save_samples(nums_count, num_samples=10, output_dir="performance_profiling/singleton/"):
    """Saves generated samples and their singletons to a .npz file."""
    os.makedirs(output_dir, exist_ok=True)

    samples = generate_samples(nums_count, num_samples)
    file_path = os.path.join(output_dir, f"pre_generated_samples_{nums_count}.npz")
    np.savez(
        file_path,
        samples=np.array([sample for sample, _ in samples], dtype=np.int64).reshape(num_samples, max(2 * nums_count - 1, 0)),
        singletons=np.array([-1 if once is None else once for _, once in samples], dtype=np.int64),
    )

    print(f"Generated {num_samples} samples of {nums_count} distinct values.")
    return file_path


def load_samples(file_path):
    """Loads samples saved by save_samples; a singleton of -1 means none."""
    with np.load(file_path) as data:
        singletons = [None if once < 0 else int(once) for once in data["singletons"]]
        return [(row.tolist(), once) for row, once in zip(data["samples"], singletons)]


def run_sample_generation(nums_count=1000):
    """Runs the sample generation process."""
    return save_samples(nums_count)


if __name__ == "__main__":
    run_sample_generation()
