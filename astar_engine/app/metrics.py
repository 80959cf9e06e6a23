from prometheus_client import Counter, Histogram

SEARCHES = Counter("astar_searches_total", "Total A* searches", ["outcome"])
BAD_REQUESTS = Counter("astar_bad_requests_total", "Rejected route payloads", ["reason"])
DURATION = Histogram("astar_search_duration_seconds", "A* search duration (seconds)", buckets=[0.001,0.005,0.01,0.05,0.1,0.2,0.5,1,2,5,10,30])
EXPANDED = Histogram("astar_expanded_nodes", "Number of nodes expanded by A*", buckets=[10,50,100,200,400,800,1600,3200,6400,12800])
