"""Grid, grid printing, path finding, breadth-first search and Dijkstra helpers."""