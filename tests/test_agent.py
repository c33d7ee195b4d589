import pytest

from mcwss.agent import Agent
from mcwss.command.agent import (
    AgentPosition,
    agent_attack_request,
    agent_destroy_request,
    agent_move_request,
    agent_place_request,
    agent_position_request,
    agent_till_request,
    agent_turn_request,
)
from mcwss.mctype import Direction, Position


class FakePlayer:
    def __init__(self):
        self.calls = []

    def exec(self, command_line, callback, response_type):
        self.calls.append((command_line, callback, response_type))


@pytest.fixture
def player():
    return FakePlayer()


def test_position_requests_and_delivers_position(player):
    agent = Agent(player)
    received = []
    agent.position(received.append)
    assert len(player.calls) == 1
    command_line, callback, response_type = player.calls[0]
    assert command_line == agent_position_request()
    assert response_type is AgentPosition
    callback(AgentPosition(y_rotation=90.0, position=Position(1.0, 2.0, 3.0)))
    assert received == [Position(1.0, 2.0, 3.0)]


def test_rotation_delivers_yaw(player):
    agent = Agent(player)
    received = []
    agent.rotation(received.append)
    command_line, callback, response_type = player.calls[0]
    assert command_line == agent_position_request()
    assert response_type is AgentPosition
    callback(AgentPosition(y_rotation=180.0, position=Position(0.0, 0.0, 0.0)))
    assert received == [180.0]


def test_move_sends_one_command_per_metre(player):
    Agent(player).move(Direction.FORWARD, 3)
    assert [call[0] for call in player.calls] == [agent_move_request(Direction.FORWARD)] * 3
    assert all(call[1] is None for call in player.calls)


@pytest.mark.parametrize("metres", [0, -2])
def test_move_without_positive_distance_sends_nothing(player, metres):
    Agent(player).move(Direction.UP, metres)
    assert player.calls == []


def test_turns(player):
    agent = Agent(player)
    agent.turn_right()
    agent.turn_left()
    assert [call[0] for call in player.calls] == [
        agent_turn_request(Direction.RIGHT),
        agent_turn_request(Direction.LEFT),
    ]


def test_turn_right_names_the_direction(player):
    Agent(player).turn_right()
    assert player.calls[0][0].endswith("right")


@pytest.mark.parametrize(
    "method, request_builder",
    [
        ("attack", agent_attack_request),
        ("use_held_item", agent_place_request),
        ("destroy_block", agent_destroy_request),
        ("till_block", agent_till_request),
    ],
)
def test_directional_actions(player, method, request_builder):
    getattr(Agent(player), method)(Direction.DOWN)
    assert player.calls == [(request_builder(Direction.DOWN), None, None)]