"""Decomposition of the global domain into per-process subdomains."""

from __future__ import annotations


class ParallelConfiguration:
    """Fill in the parallel part of ``parameters`` for one process.

    Processes are ordered lexicographically with x varying fastest. The
    constructor works out this process's position in the process grid, its
    six neighbours (None where there is none), the block sizes in every
    direction, the local size and the first corner of its subdomain.
    """

    def __init__(self, parameters, rank=0, nproc=1):
        self._parameters = parameters
        parameters.parallel.rank = rank

        self._create_indices()
        self._locate_neighbors()
        self._compute_sizes()

        num_processors = parameters.parallel.num_processors
        expected = num_processors[0] * num_processors[1]
        if parameters.geometry.dim == 3:
            expected *= num_processors[2]

        if nproc != expected:
            raise ValueError(
                "The number of processors specified in the configuration file "
                "doesn't match the communicator"
            )

    def _create_indices(self):
        parallel = self._parameters.parallel
        px, py, _ = parallel.num_processors
        rank = parallel.rank
        parallel.indices = [rank % px, (rank // px) % py, rank // (px * py)]

    def compute_rank_from_indices(self, i, j, k=0):
        """Rank of the process at grid position (i, j, k), or None outside the grid."""
        px, py, pz = self._parameters.parallel.num_processors
        if not (0 <= i < px and 0 <= j < py and 0 <= k < pz):
            return None
        rank = i + j * px
        if self._parameters.geometry.dim == 3:
            rank += k * px * py
        return rank

    def _locate_neighbors(self):
        parallel = self._parameters.parallel
        i, j, k = parallel.indices

        if self._parameters.geometry.dim == 2:
            parallel.left_nb = self.compute_rank_from_indices(i - 1, j, 0)
            parallel.right_nb = self.compute_rank_from_indices(i + 1, j, 0)
            parallel.bottom_nb = self.compute_rank_from_indices(i, j - 1, 0)
            parallel.top_nb = self.compute_rank_from_indices(i, j + 1, 0)
            parallel.front_nb = None
            parallel.back_nb = None
        else:
            parallel.left_nb = self.compute_rank_from_indices(i - 1, j, k)
            parallel.right_nb = self.compute_rank_from_indices(i + 1, j, k)
            parallel.bottom_nb = self.compute_rank_from_indices(i, j - 1, k)
            parallel.top_nb = self.compute_rank_from_indices(i, j + 1, k)
            parallel.front_nb = self.compute_rank_from_indices(i, j, k - 1)
            parallel.back_nb = self.compute_rank_from_indices(i, j, k + 1)

    def _compute_sizes(self):
        parameters = self._parameters
        parallel = parameters.parallel
        geometry = parameters.geometry
        dim = geometry.dim
        global_sizes = (geometry.size_x, geometry.size_y, geometry.size_z)

        sizes = [[], [], []]
        for axis in range(dim):
            count = parallel.num_processors[axis]
            base, remainder = divmod(global_sizes[axis], count)
            sizes[axis] = [base + (1 if block < remainder else 0) for block in range(count)]

        first_corner = list(parallel.first_corner)
        local_size = list(parallel.local_size)
        for axis in range(dim):
            index = parallel.indices[axis]
            first_corner[axis] = sum(sizes[axis][:index])
            local_size[axis] = sizes[axis][index]
        if dim == 2:
            first_corner[2] = 0

        # Boundary blocks carry one extra layer for the external pressure values
        # used by the linear solver.
        for axis in range(dim):
            sizes[axis][0] += 1
            sizes[axis][-1] += 1

        parallel.sizes = sizes
        parallel.first_corner = first_corner
        parallel.local_size = local_size