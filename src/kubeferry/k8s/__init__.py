"""Kubernetes cluster access."""

from kubeferry.k8s.client import K8sClient
from kubeferry.k8s.scheme import Scheme, server_scheme

__all__ = ["K8sClient", "Scheme", "server_scheme"]
