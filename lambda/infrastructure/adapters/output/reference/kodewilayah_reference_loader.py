"""
Kode Wilayah Reference Loader
Busca e interpreta o CSV Permendagri (código, nome) com ~83 mil unidades administrativas
"""
import csv
import io
from typing import List, Optional

from ddtrace import tracer

from application.ports.output.reference_dataset_port import IReferenceDatasetLoader
from domain.constants import API
from domain.entities.reference_row import ReferenceRow
from domain.exceptions import SourceUnavailableException
from domain.value_objects.administrative_code import AdministrativeCode
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class KodeWilayahReferenceLoader(IReferenceDatasetLoader):
    """
    Loader da tabela de referência Kemendagri

    - Uma linha por unidade: `codigo,nome[,...]` (campos extras ignorados)
    - Códigos pontuados (11.01.01) convertidos para largura fixa (11010100)
    - Nome em maiúsculas; sem deduplicação, ordem do dataset preservada
    """

    def __init__(
        self,
        source_url: str = API.KODEWILAYAH_CSV_URL,
        http_client: Optional[JsonHttpClient] = None
    ):
        self.source_url = source_url
        self.http = http_client or JsonHttpClient(
            upstream="Kemendagri reference dataset",
            exception_class=SourceUnavailableException
        )

    @tracer.wrap(resource="reference.load")
    async def load(self) -> List[ReferenceRow]:
        text = await self.http.get_text(self.source_url)
        rows = self.parse(text)
        logger.info("Reference dataset loaded", rows=len(rows), source=self.source_url)
        return rows

    @staticmethod
    def parse(text: str) -> List[ReferenceRow]:
        """
        Converte o CSV em ReferenceRow

        Um cabeçalho (primeira linha cujo primeiro campo não é código) é descartado.

        Raises:
            SourceUnavailableException: Linha malformada ou dataset vazio
        """
        rows: List[ReferenceRow] = []
        first_record = True
        reader = csv.reader(io.StringIO(text))

        try:
            for record in reader:
                if not record or not record[0].strip():
                    continue

                raw_code = record[0].strip()
                if not AdministrativeCode.is_code(raw_code):
                    if first_record:
                        first_record = False
                        continue
                    raise SourceUnavailableException(
                        "Malformed reference dataset row",
                        details={"line": reader.line_num, "code": raw_code}
                    )

                first_record = False
                name = record[1] if len(record) > 1 else ""
                rows.append(ReferenceRow.from_raw(AdministrativeCode.from_dotted(raw_code), name))
        except (csv.Error, ValueError) as ex:
            raise SourceUnavailableException(
                "Failed to parse reference dataset",
                details={"line": reader.line_num, "error": str(ex)}
            ) from ex

        if not rows:
            raise SourceUnavailableException("Reference dataset is empty")

        return rows
