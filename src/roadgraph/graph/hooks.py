# graph/hooks.py


class NoopHooks:
    def vertex_added(self, *_, **__):
        pass

    def edge_added(self, *_, **__):
        pass

    def missing_edge(self, *_, **__):
        pass
