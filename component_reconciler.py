#!/usr/bin/env python3
import argparse
import os
import sys
from core.clients.in_memory_store import InMemoryStore
from core.clients.kubernetes_client import KubernetesStore
from core.models import Component, NamespacedName
from core.repositories import ComponentRepository, RuntimeImageRepository
from core.services.component_reconciliation_service import (
    SHARED_IMAGES_NAMESPACE,
    ComponentReconciliationService,
)
from core.utils.logging import setup_logger
from core.utils.yaml_loader import dump_manifests

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Component Reconciler")
    parser.add_argument('--namespace', help='Namespace of the Component to reconcile')
    parser.add_argument('--name', help='Name of the Component to reconcile')
    parser.add_argument('--dry-run', action='store_true',
                        help='Reconcile the components file against an in-memory store and print the resulting manifests')
    args = parser.parse_args(argv)
    if not args.dry_run and not (args.namespace and args.name):
        parser.error("--namespace and --name are required unless --dry-run is set")
    return args


def build_service(args: argparse.Namespace) -> tuple[ComponentReconciliationService, InMemoryStore | None]:
    shared_namespace = os.environ.get("SHARED_IMAGES_NAMESPACE", SHARED_IMAGES_NAMESPACE)
    runtime_images_file = os.environ.get("RUNTIME_IMAGES_FILE", f"{ROOT_DIR}/runtime-images.yaml")
    runtime_images = RuntimeImageRepository(runtime_images_file).load()

    if args.dry_run:
        components_file = os.environ.get("COMPONENTS_FILE", f"{ROOT_DIR}/components.yaml")
        components = ComponentRepository(components_file).find_all()
        store = InMemoryStore(*components)
        requests = [NamespacedName(namespace=c.namespace, name=c.name) for c in components]
        service = ComponentReconciliationService(store, requests, runtime_images, shared_namespace)
        return service, store

    requests = [NamespacedName(namespace=args.namespace, name=args.name)]
    service = ComponentReconciliationService(KubernetesStore(), requests, runtime_images, shared_namespace)
    return service, None


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logger("ComponentReconciler")

    try:
        service, store = build_service(args)
        logger.info(f"Starting component reconciler for {len(service.requests)} component(s)")
        service.run()
        if store is not None:
            manifests = [
                obj.to_manifest() for obj in store.objects.values()
                if not isinstance(obj, Component)
            ]
            dump_manifests(manifests, sys.stdout)
        logger.info("Component reconciliation completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Component reconciliation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
