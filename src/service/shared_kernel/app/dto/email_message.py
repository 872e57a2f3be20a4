import attrs


@attrs.frozen
class EmailMessage:
    sender: str
    to: str
    subject: str
    html: str

    def to_payload(self) -> dict[str, str]:
        return {'from': self.sender, 'to': self.to, 'subject': self.subject, 'html': self.html}
