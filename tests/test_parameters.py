from nseof.parameters import BoundaryType, Parameters


def test_default_velocity_profile_is_uniform():
    assert Parameters().simulation.velocity_profile == "uniform"


def test_instances_do_not_share_lists():
    first = Parameters()
    second = Parameters()
    first.walls.vector_left[0] = 4.5
    first.parallel.sizes[0].append(3)
    first.parallel.num_processors[1] = 2
    assert second.walls.vector_left[0] == first.walls.vector_right[0]
    assert second.parallel.sizes[0] == []
    assert second.parallel.num_processors[1] == second.parallel.num_processors[0]


def test_wall_vectors_have_three_equal_components():
    walls = Parameters().walls
    vectors = [
        walls.vector_left,
        walls.vector_right,
        walls.vector_bottom,
        walls.vector_top,
        walls.vector_front,
        walls.vector_back,
    ]
    for vector in vectors:
        assert len(vector) == 3
        assert vector == walls.vector_left


def test_no_neighbours_by_default():
    parallel = Parameters().parallel
    neighbours = {
        parallel.left_nb,
        parallel.right_nb,
        parallel.bottom_nb,
        parallel.top_nb,
        parallel.front_nb,
        parallel.back_nb,
    }
    assert neighbours == {None}


def test_geometry_unset_values_match_each_other():
    geometry = Parameters().geometry
    assert geometry.dim == geometry.size_x == geometry.size_y == geometry.size_z
    assert geometry.dim == Parameters().solver.max_iterations


def test_boundary_types_round_trip_by_value():
    members = list(BoundaryType)
    assert [BoundaryType(member.value) for member in members] == members
    assert len({member.value for member in members}) == len(members)
    assert BoundaryType["NEUMANN"] is BoundaryType.NEUMANN


def test_mixing_length_delta_is_assignable():
    parameters = Parameters()
    assert parameters.turbulence.delta_mix_len is None
    parameters.turbulence.delta_mix_len = lambda x, re: x * re
    assert parameters.turbulence.delta_mix_len(2.0, 3.0) == 6.0


def test_meshsize_starts_unset():
    parameters = Parameters()
    assert parameters.meshsize is None
    parameters.meshsize = "mesh"
    assert Parameters().meshsize is None