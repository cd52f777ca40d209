from flask import Flask, request, jsonify

from advent_grid.config import default_turn_penalty
from advent_grid.days import DAYS, get_day
from advent_grid.maze import parse_maze, solve_maze
from advent_grid.types import Direction

app = Flask(__name__)


def _heading(value, default):
    if value is None or value == '':
        return default
    return Direction.from_char(str(value))


def node_to_json(node) -> dict:
    return {
        'x': node.position.x,
        'y': node.position.y,
        'direction': node.direction.to_char() if node.direction is not None else None,
    }


@app.get('/api/days')
def api_list_days():
    return jsonify({'days': sorted(DAYS)})


@app.post('/api/solve')
def api_solve():
    try:
        data = request.get_json(force=True) or {}
        day = int(data.get('day'))
        text = data.get('input')
        if not isinstance(text, str):
            raise ValueError('input must be a string')
        solver = get_day(day)
        part = data.get('part')
        result = {'day': day, 'part_one': None, 'part_two': None}
        if part in (None, 1):
            result['part_one'] = solver.part_one(text)
        if part in (None, 2):
            result['part_two'] = solver.part_two(text)
        return jsonify(result)
    except Exception as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400


@app.post('/api/path')
def api_path():
    try:
        data = request.get_json(force=True) or {}
        text = data.get('maze')
        if not isinstance(text, str):
            raise ValueError('maze must be a string')
        maze = parse_maze(text)
        solution = solve_maze(
            maze,
            turn_penalty=int(data['turn_penalty']) if data.get('turn_penalty') is not None else default_turn_penalty(),
            heading=_heading(data.get('heading'), Direction.EAST),
            goal_heading=_heading(data.get('goal_heading'), None),
        )
        return jsonify({
            'found': solution.found,
            'path': [node_to_json(n) for n in solution.path] if solution.found else [],
            'cost': solution.cost,
            'turns': solution.turns,
            'ascii': solution.ascii,
        })
    except Exception as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400


if __name__ == '__main__':
    app.run(debug=True)
