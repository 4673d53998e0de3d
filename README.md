# cultivo

Aplicativo de terminal e biblioteca para acompanhar terrenos agrícolas: guardar
o resultado da análise de solo de um terreno, sugerir plantas compatíveis com
esse solo e acompanhar a plantação ativa de cada terreno. Traz também as
entidades de moderação (denúncias de usuários, postagens e comentários).

Todos os dados ficam em memória enquanto o programa está aberto.

## Instalação

```
pip install .
```

Para rodar os testes:

```
pip install ".[test]"
pytest
```

## Uso

Inicie o menu interativo:

```
cultivo
```

Para começar com o catálogo de plantas já preenchido com as dez plantas padrão:

```
cultivo --seed
```

O menu lista as rotas registradas no formato `[código] Nome`. Digite o código
entre colchetes para abrir a funcionalidade:

- `inserir-resultado-de-analise-de-solo` — lista os terrenos do usuário da
  sessão e pede o ID de um deles, a acidez, o índice de minerais, o índice de
  argila, o índice de silte e a carga elétrica do solo. Os valores inteiros são
  reduzidos ao intervalo de 0 a 255. Acidez negativa, índices acima de 100,
  valores que não são números ou um ID de terreno inexistente são recusados com
  uma mensagem.

Outros comandos no prompt:

- `voltar` — limpa a tela e mostra o menu de novo;
- `sair` — encerra a sessão (o fim da entrada também encerra).

Um código desconhecido mostra "Tentou acessar uma rota inválida.".

## Uso como biblioteca

- `cultivo.enums` — `Cargo`, `Clima`, `ExposicaoSolar`, `EstadoDaDenuncia`,
  `MotivoDaDenuncia`, `TipoDoDenunciavel`; `str()` de cada membro dá o rótulo
  de exibição;
- `cultivo.terreno` — `Terreno`, `Solo`, `Planta`, `Plantacao`;
- `cultivo.usuario` — `Usuario`;
- `cultivo.moderacao` — `Denunciavel` e `Denuncia`;
- `cultivo.feed` — `Comentavel`, `Postagem`, `Comentario`;
- `cultivo.validacao` — `valide_solo`, que levanta `ValueError` para acidez ou
  carga elétrica negativas e `ForaDoIntervaloError` para índices fora de 0 a 100;
- `cultivo.daos` — interfaces abstratas de acesso a dados;
- `cultivo.armazenamento` — `Armazenamento`, as listas em memória com uma trava
  por tipo de entidade, e `preencha_plantas`;
- `cultivo.em_memoria` — implementações em memória das interfaces de
  `cultivo.daos` e `planta_eh_compativel`, que compara pH, minerais, retenção
  de água e tolerância ao vento;
- `cultivo.gerentes` — `GerenteDeTerrenos` (sugestões de plantas, análise de
  solo, início, finalização e desistência de plantações), `GerenteDePlantacoes`,
  `GerenteDeDenuncias` e `GerenteDeDaosDeDenunciaveis`;
- `cultivo.casos_de_uso` — `InserirResultadoDeAnaliseDeSolo`, o diálogo da
  rota acima;
- `cultivo.roteador` — `Aplicativo`, `Contexto` e `Rota`, o menu e o
  contêiner de dependências;
- `cultivo.cli` — `main` e `construa_aplicativo`.

## O que o pacote não faz

- Não há login: a sessão usa sempre um usuário fixo, "John Doe".
- Nada é gravado em disco; ao sair, todos os dados se perdem.
- O menu tem uma única rota. Não há comando para cadastrar terrenos, ver
  sugestões de plantas, gerir plantações ou denúncias; essas operações existem
  apenas em `cultivo.gerentes`. Como o menu não cria terrenos, a análise de
  solo pelo terminal não encontra terreno algum.
- `GerenteDeDaosDeDenunciaveis` só sabe servir usuários; postagens e
  comentários levantam `NotImplementedError`.