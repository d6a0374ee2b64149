from carassist.client.nats_client import VehicleBusClient

__all__ = ["VehicleBusClient"]
