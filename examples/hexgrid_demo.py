from hexes import Hex, Layout, Point, hex_linedraw, layout_flat, rectangle_map
from hexes.graph import build_hex_graph, path_cost, shortest_hex_path

cols, rows = 10, 10
layout = Layout(layout_flat, Point(10, 10), Point(10, 10))
start = Hex(0, 0, 0)
goal = Hex(5, -1, -4)  # keep within demo bounds

blocked = {Hex(1, 0, -1), Hex(2, 0, -2), Hex(3, -1, -2)}


if __name__ == "__main__":
    print("line:", hex_linedraw(start, goal))
    graph = build_hex_graph(h for h in rectangle_map(cols, rows) if h not in blocked)
    path = shortest_hex_path(graph, start, goal)
    print("path:", path)
    print("cost:", path_cost(graph, path))
    print("pixel centre of goal:", layout.hex_to_pixel(goal))
    print("corners of goal:", layout.polygon_corners(goal))
