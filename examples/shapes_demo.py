import networkx as nx

from honeycomb import Grid, HexFactory

Hex = HexFactory.configure(size=20, orientation="pointy")
grid = Grid(hex_factory=Hex)

start = Hex(0, 0)
goal = Hex(3, 2)  # keep within the rectangle


if __name__ == "__main__":
    grid.rectangle(6, 5)
    print("hexes:", len(grid))
    print("line:", [str(hex_) for hex_ in start.hexes_between(goal)])
    print("graph path:", nx.shortest_path(grid.to_graph(), str(start), str(goal)))
    print("pixel of goal:", grid.hex_to_point(goal))
    print("hex at (40, 40):", grid.point_to_hex((40, 40)))
    print(grid.to_frame().head())
