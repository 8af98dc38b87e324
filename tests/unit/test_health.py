"""Unit tests for transfer pod health checks."""

import pytest
from fakes import api_failure, make_pod
from kubernetes import client

from kubeferry.core.models import AggregateError, NamespacedName, NotFoundError, PodHealthError
from kubeferry.transfer.health import (
    are_containers_ready,
    are_filtered_pods_healthy,
    is_pod_healthy,
    label_selector,
)

LABELS = {"app": "kubeferry"}


class TestAreContainersReady:
    """Test the per-pod readiness rule."""

    def test_two_ready_containers(self):
        """Test a pod with both containers ready is healthy."""
        assert are_containers_ready(make_pod("server", [True, True])) == (True, None)

    @pytest.mark.parametrize("ready", [[True], [True, True, True], []])
    def test_wrong_container_count(self, ready):
        """Test any count other than two is an error, not just unready."""
        healthy, err = are_containers_ready(make_pod("server", ready))

        assert healthy is False
        assert isinstance(err, PodHealthError)
        assert f"expected 2 container statuses found {len(ready)}, for pod dest-ns/server" == str(err)
        assert err.container is None

    def test_not_ready_container(self):
        """Test the error names the container that is not ready."""
        healthy, err = are_containers_ready(make_pod("server", [True, False]))

        assert healthy is False
        assert str(err) == "container rsync in pod dest-ns/server is not ready"
        assert err.pod == NamespacedName("dest-ns", "server")
        assert err.container == "rsync"

    def test_pod_without_status(self):
        """Test a pod that reports no status yet."""
        pod = client.V1Pod(metadata=client.V1ObjectMeta(name="server", namespace="dest-ns"))

        healthy, err = are_containers_ready(pod)

        assert healthy is False
        assert isinstance(err, PodHealthError)


class TestIsPodHealthy:
    """Test single pod checks."""

    @pytest.mark.asyncio
    async def test_healthy_pod(self, cluster):
        """Test a ready pod."""
        cluster.add_pod(make_pod("server", [True, True]))

        assert await is_pod_healthy(cluster, NamespacedName("dest-ns", "server")) == (True, None)

    @pytest.mark.asyncio
    async def test_missing_pod(self, cluster):
        """Test a missing pod hands back the not found error."""
        healthy, err = await is_pod_healthy(cluster, NamespacedName("dest-ns", "server"))

        assert healthy is False
        assert isinstance(err, NotFoundError)

    @pytest.mark.asyncio
    async def test_api_failure(self, cluster):
        """Test API failures are handed back unchanged."""
        failure = api_failure()
        cluster.failures[("get", "Pod")] = failure

        assert await is_pod_healthy(cluster, NamespacedName("dest-ns", "server")) == (False, failure)


class TestAreFilteredPodsHealthy:
    """Test label selected replica checks."""

    def test_label_selector(self):
        """Test label sets are formatted as selectors."""
        assert label_selector({"app": "kubeferry", "role": "server"}) == "app=kubeferry,role=server"
        assert label_selector({}) == ""

    @pytest.mark.asyncio
    async def test_no_pods(self, cluster):
        """Test nothing matching is not healthy but not an error either."""
        assert await are_filtered_pods_healthy(cluster, "dest-ns", LABELS) == (False, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("healthy_index", [0, 1, 2])
    async def test_one_healthy_replica(self, cluster, healthy_index):
        """Test one healthy replica is enough wherever it is."""
        for i in range(3):
            ready = [True, True] if i == healthy_index else [True, False]
            cluster.add_pod(make_pod(f"server-{i}", ready, labels=LABELS))

        assert await are_filtered_pods_healthy(cluster, "dest-ns", LABELS) == (True, None)

    @pytest.mark.asyncio
    async def test_no_healthy_replica(self, cluster):
        """Test every pod's failure is reported."""
        cluster.add_pod(make_pod("server-0", [True, False], labels=LABELS))
        cluster.add_pod(make_pod("server-1", [True], labels=LABELS))
        cluster.add_pod(make_pod("server-2", [False, False], labels=LABELS))

        healthy, err = await are_filtered_pods_healthy(cluster, "dest-ns", LABELS)

        assert healthy is False
        assert isinstance(err, AggregateError)
        assert len(err.errors) == 3
        assert {e.pod.name for e in err.errors} == {"server-0", "server-1", "server-2"}

    @pytest.mark.asyncio
    async def test_selector_and_namespace_filter(self, cluster):
        """Test only pods in the namespace with the labels are considered."""
        cluster.add_pod(make_pod("other-labels", [True, True], labels={"app": "other"}))
        cluster.add_pod(make_pod("other-ns", [True, True], namespace="elsewhere", labels=LABELS))
        cluster.add_pod(make_pod("server", [False, True], labels=LABELS))

        healthy, err = await are_filtered_pods_healthy(cluster, "dest-ns", LABELS)

        assert healthy is False
        assert [e.pod.name for e in err.errors] == ["server"]

    @pytest.mark.asyncio
    async def test_list_failure(self, cluster):
        """Test a failing list call is handed back."""
        failure = api_failure()
        cluster.failures[("list", "Pod")] = failure

        assert await are_filtered_pods_healthy(cluster, "dest-ns", LABELS) == (False, failure)
