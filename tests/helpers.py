from core.models import Kind, Record


def make_record(client, kind, reference, security, quantity, parent=None):
    return Record(
        client=client,
        kind=Kind(kind),
        reference=reference,
        security=security,
        quantity=quantity,
        parent=parent,
    )
