from __future__ import annotations

from interfaces.catalog.entry import LlmEntry


CATALOG_ENTRIES: list[LlmEntry] = [
    LlmEntry(
        id="1",
        name="T5",
        model_size="11B",
        org="Google",
        latest_update="October 2019",
        license_type="Apache 2.0",
        content="Exploring the Limits of Transfer Learning with a Unified Text-to-Text Transformer.",
        link="https://github.com/google-research/text-to-text-transfer-transformer",
    ),
    LlmEntry(
        id="2",
        name="RWKV 4",
        model_size="14B",
        org="BlinkDL",
        latest_update="August 2021",
        license_type="Apache 2.0",
        content="The RWKV Language Model with transformer-level LLM performance.",
        link="https://github.com/BlinkDL/RWKV-LM#rwkv-parallelizable-rnn-with-transformer-level-llm-performance-pronounced-as-rwakuv-from-4-major-params-r-w-k-v",
    ),
    LlmEntry(
        id="3",
        name="GPT-NeoX-20B",
        model_size="20B",
        org="EleutherAI",
        latest_update="April 2022",
        license_type="Apache 2.0",
        content="GPT-NeoX-20B: An Open-Source Autoregressive Language Model.",
        link="https://huggingface.co/EleutherAI/gpt-neox-20b",
    ),
    LlmEntry(
        id="4",
        name="YaLM-100B",
        model_size="100B",
        org="Yandex",
        latest_update="June 2022",
        license_type="Apache 2.0",
        content="Yandex publishes YaLM 100B, the largest GPT-like neural network in open source.",
        link="https://github.com/yandex/YaLM-100B/",
    ),
    LlmEntry(
        id="5",
        name="UL2",
        model_size="20B",
        org="Google",
        latest_update="October 2022",
        license_type="Apache 2.0",
        content="UL2 20B: An Open Source Unified Language Learner.",
        link="https://github.com/google-research/google-research/tree/master/ul2",
    ),
    LlmEntry(
        id="6",
        name="Bloom",
        model_size="176B",
        org="BigScience",
        latest_update="November 2022",
        license_type="OpenRAIL-M v1",
        content="BLOOM: A 176B-Parameter Open-Access Multilingual Language Model.",
        link="https://huggingface.co/bigscience/bloom",
    ),
    LlmEntry(
        id="7",
        name="ChatGLM",
        model_size="6B",
        org="THUDM",
        latest_update="March 2023",
        license_type="Custom with Usage Restrictions",
        content="ChatGLM: Open bilingual chat model with 6B parameters.",
        link="https://github.com/THUDM/ChatGLM-6B/blob/main/README_en.md",
    ),
    LlmEntry(
        id="8",
        name="Cerebras-GPT",
        model_size="13B",
        org="Cerebras",
        latest_update="March 2023",
        license_type="Apache 2.0",
        content="Cerebras-GPT: A Family of Open, Compute-efficient, Large Language Models.",
        link="https://huggingface.co/cerebras/Cerebras-GPT-13B",
    ),
    LlmEntry(
        id="9",
        name="Open Assistant",
        model_size="12B",
        org="LAION",
        latest_update="March 2023",
        license_type="Apache 2.0",
        content="Democratizing Large Language Model Alignment with Pythia family.",
        link="https://huggingface.co/OpenAssistant/oasst-sft-4-pythia-12b-epoch-3.5",
    ),
    LlmEntry(
        id="10",
        name="Pythia",
        model_size="12B",
        org="EleutherAI",
        latest_update="April 2023",
        license_type="Apache 2.0",
        content="Pythia: A Suite for Analyzing Large Language Models Across Training and Scaling",
        link="https://huggingface.co/EleutherAI/pythia-12b",
    ),
    LlmEntry(
        id="11",
        name="Dolly",
        model_size="12B",
        org="Databricks",
        latest_update="April 2023",
        license_type="MIT",
        content="Free Dolly: Introducing the World's First Truly Open Instruction-Tuned LLM.",
        link="https://huggingface.co/databricks/dolly-v2-12b",
    ),
    LlmEntry(
        id="12",
        name="StableLM-Alpha",
        model_size="65B",
        org="Stability AI",
        latest_update="April 2023",
        license_type="CC BY-SA-4.0",
        content="Stability AI Launches the First of its StableLM Suite of Language Models.",
        link="https://huggingface.co/stabilityai/stablelm-base-alpha-7b",
    ),
    LlmEntry(
        id="13",
        name="FastChat-T5",
        model_size="3B",
        org="LMSYS",
        latest_update="April 2023",
        license_type="Apache 2.0",
        content="Compact and commercial-friendly chatbot.",
        link="https://huggingface.co/lmsys/fastchat-t5-3b-v1.0",
    ),
    LlmEntry(
        id="14",
        name="DLite",
        model_size="1.5B",
        org="AI Squared",
        latest_update="May 2023",
        license_type="Apache 2.0",
        content="Announcing DLite V2: Lightweight, Open LLMs That Can Run Anywhere.",
        link="https://medium.com/ai-squared/announcing-dlite-v2-lightweight-open-llms-that-can-run-anywhere-a852e5978c6e",
    ),
    LlmEntry(
        id="15",
        name="h2oGPT",
        model_size="20B",
        org="H2O.ai",
        latest_update="May 2023",
        license_type="Apache 2.0",
        content="Building the World's Best Open-Source Large Language Model: H2O.ai's Journey.",
        link="https://github.com/h2oai/h2ogpt",
    ),
    LlmEntry(
        id="16",
        name="MPT-7B",
        model_size="7B",
        org="MosaicML",
        latest_update="May 2023",
        license_type="Apache 2.0, CC BY-SA-3.0",
        content="Introducing MPT-7B: A New Standard for Open-Source, Commercially Usable LLMs.",
        link="https://huggingface.co/mosaicml/mpt-7b",
    ),
    LlmEntry(
        id="17",
        name="RedPajama-INCITE",
        model_size="7B",
        org="Together",
        latest_update="May 2023",
        license_type="Apache 2.0",
        content="Releasing 3B and 7B RedPajama-INCITE family of models.",
        link="https://huggingface.co/togethercomputer/RedPajama-INCITE-7B-Base",
    ),
    LlmEntry(
        id="18",
        name="OpenLLaMA",
        model_size="13B",
        org="OpenLM",
        latest_update="May 2023",
        license_type="Apache 2.0",
        content="OpenLLaMA: An Open Reproduction of LLaMA.",
        link="https://huggingface.co/openlm-research/open_llama_13b",
    ),
    LlmEntry(
        id="19",
        name="Falcon",
        model_size="180B",
        org="TII",
        latest_update="May 2023",
        license_type="Apache 2.0",
        content="The RefinedWeb Dataset for Falcon LLM: Outperforming Curated Corpora with Web Data.",
        link="https://huggingface.co/tiiuae/falcon-180B",
    ),
    LlmEntry(
        id="20",
        name="LLaMA 2",
        model_size="70B",
        org="Meta",
        latest_update="June 2023",
        license_type="Custom with Usage Restrictions",
        content="Llama 2: Open Foundation and Fine-Tuned Chat Models.",
        link="https://huggingface.co/meta-llama/Llama-2-70b",
    ),
    LlmEntry(
        id="21",
        name="ChatGLM2",
        model_size="6B",
        org="THUDM",
        latest_update="June 2023",
        license_type="Custom with Usage Restrictions",
        content="ChatGLM2-6B: Enhanced bilingual chat model with improved performance.",
        link="https://huggingface.co/THUDM/chatglm2-6b",
    ),
    LlmEntry(
        id="22",
        name="Llama Scout",
        model_size="17B",
        org="Meta",
        latest_update="April 2025",
        license_type="Apache 2.0",
        content="Mixture-of-experts (MoE) architecture and fusion native multimodality.",
        link="https://huggingface.co/meta-llama/Llama-4-Scout-17B-16E",
    ),
    LlmEntry(
        id="23",
        name="Jais-13b",
        model_size="13B",
        org="Core42",
        latest_update="August 2023",
        license_type="Apache 2.0",
        content="Jais and Jais-chat: Arabic-Centric Foundation and Instruction-Tuned Open Generative Large Language Models.",
        link="https://huggingface.co/core42/jais-13b",
    ),
    LlmEntry(
        id="24",
        name="OpenHermes",
        model_size="13B",
        org="Nous Research",
        latest_update="September 2023",
        license_type="MIT",
        content="OpenHermes: Open access chat LLM with improved instruction following.",
        link="https://llm.extractum.io/model/teknium%2FOpenHermes-2.5-Mistral-7B,4i77pGfmntbDczv7CzizSk",
    ),
    LlmEntry(
        id="25",
        name="OpenLM",
        model_size="7B",
        org="ML Foundations",
        latest_update="September 2023",
        license_type="MIT",
        content="Open LM: A minimal but performative language modeling repository.",
        link="https://github.com/mlfoundations/open_lm",
    ),
    LlmEntry(
        id="26",
        name="Mistral 7B",
        model_size="7B",
        org="Mistral AI",
        latest_update="September 2023",
        license_type="Apache 2.0",
        content="Mistral 7B: A new state-of-the-art open model.",
        link="https://huggingface.co/mistralai/Mistral-7B-Instruct-v0.1",
    ),
    LlmEntry(
        id="27",
        name="ChatGLM3",
        model_size="6B",
        org="THUDM",
        latest_update="October 2023",
        license_type="Custom with Usage Restrictions",
        content="ChatGLM3: Enhanced multilingual chat model with improved performance.",
        link="https://huggingface.co/THUDM/chatglm3-6b",
    ),
    LlmEntry(
        id="28",
        name="Skywork",
        model_size="13B",
        org="Skywork AI",
        latest_update="October 2023",
        license_type="Custom with Usage Restrictions",
        content="Skywork: A strong foundation model with math capabilities.",
        link="https://huggingface.co/Skywork/Skywork-13B-Base",
    ),
    LlmEntry(
        id="29",
        name="Jais-30b",
        model_size="30B",
        org="Core42",
        latest_update="October 2023",
        license_type="Apache 2.0",
        content="Jais-30B: Advancing Arabic language capabilities.",
        link="https://huggingface.co/core42/jais-30b-v1",
    ),
    LlmEntry(
        id="30",
        name="Yi-34B",
        model_size="34B",
        org="01.AI",
        latest_update="November 2023",
        license_type="Apache 2.0",
        content="Yi Series: High-performance open foundation models.",
        link="https://huggingface.co/01-ai/Yi-34B",
    ),
    LlmEntry(
        id="31",
        name="Mixtral-8x7B",
        model_size="47B",
        org="Mistral AI",
        latest_update="December 2023",
        license_type="Apache 2.0",
        content="Mixtral: A Sparse Mixture of Experts.",
        link="https://huggingface.co/mistralai/Mixtral-8x7B-v0.1",
    ),
    LlmEntry(
        id="32",
        name="Solar-10.7B",
        model_size="10.7B",
        org="Upstage",
        latest_update="December 2023",
        license_type="Apache 2.0",
        content="Solar: Optimized for both English and Code.",
        link="https://huggingface.co/upstage/SOLAR-10.7B-v1.0",
    ),
    LlmEntry(
        id="33",
        name="DeepSeek",
        model_size="67B",
        org="DeepSeek",
        latest_update="December 2023",
        license_type="Custom with Usage Restrictions",
        content="DeepSeek LLM: Specialized in Code Generation.",
        link="https://github.com/deepseek-ai/deepseek-LLM",
    ),
    LlmEntry(
        id="34",
        name="Phi-2",
        model_size="2.7B",
        org="Microsoft",
        latest_update="December 2023",
        license_type="MIT",
        content="Phi-2: Small Language Model with Amazing Capabilities.",
        link="https://huggingface.co/microsoft/phi-2",
    ),
    LlmEntry(
        id="35",
        name="Nous-Hermes-2",
        model_size="13B",
        org="Nous Research",
        latest_update="January 2024",
        license_type="Apache 2.0",
        content="Nous-Hermes-2: Enhanced Instruction Following.",
        link="https://huggingface.co/NousResearch/Nous-Hermes-2-Yi-34b",
    ),
    LlmEntry(
        id="36",
        name="StableLM 2",
        model_size="12B",
        org="Stability AI",
        latest_update="January 2024",
        license_type="Apache 2.0",
        content="StableLM 2: Next Generation Language Model.",
        link="https://stability.ai/news/introducing-stable-lm-2-12b",
    ),
    LlmEntry(
        id="37",
        name="Salamadra 2B",
        model_size="2B",
        org="Mistral AI",
        latest_update="May 2024",
        license_type="Apache 2.0",
        content="Decoder-only transformer model trained across 35 languages.",
        link="https://huggingface.co/BSC-LT/salamandra-2b",
    ),
    LlmEntry(
        id="38",
        name="RWKV 5",
        model_size="7B",
        org="BlinkDL",
        latest_update="January 2024",
        license_type="Apache 2.0",
        content="RWKV 5: Advanced RNN-based language model.",
        link="https://github.com/BlinkDL/RWKV-LM",
    ),
    LlmEntry(
        id="39",
        name="OLMo",
        model_size="7B",
        org="AI2",
        latest_update="February 2024",
        license_type="Apache 2.0",
        content="A truly open language model with comprehensive documentation.",
        link="https://huggingface.co/allenai/OLMo-7B",
    ),
    LlmEntry(
        id="40",
        name="Qwen1.5",
        model_size="72B",
        org="Alibaba",
        latest_update="February 2024",
        license_type="Custom with Usage Restrictions",
        content="Introducing Qwen1.5: Advanced multilingual capabilities.",
        link="https://huggingface.co/Qwen/Qwen1.5-0.5B",
    ),
    LlmEntry(
        id="41",
        name="LWM",
        model_size="1M",
        org="LargeWorldModel",
        latest_update="February 2024",
        license_type="Custom with Usage Restrictions",
        content="Large World Model with extended context length.",
        link="https://github.com/LargeWorldModel/LWM",
    ),
    LlmEntry(
        id="42",
        name="Gemma",
        model_size="7B",
        org="Google",
        latest_update="February 2024",
        license_type="Custom with Usage Restrictions",
        content="Introducing Gemma: Google's open model series.",
        link="https://huggingface.co/google/gemma-7b",
    ),
    LlmEntry(
        id="43",
        name="DeepSeek R1",
        model_size="70B",
        org="DeepSeek",
        latest_update="January 2025",
        license_type="MIT",
        content="Uses MoE architecture for efficient, scalable AI.",
        link="https://huggingface.co/deepseek-ai/DeepSeek-R1",
    ),
    LlmEntry(
        id="44",
        name="Qwen1.5 MoE",
        model_size="14.3B",
        org="Alibaba",
        latest_update="March 2024",
        license_type="Custom with Usage Restrictions",
        content="Matching 7B Model Performance with 1/3 Activated Parameters.",
        link="https://huggingface.co/Qwen/Qwen1.5-MoE",
    ),
    LlmEntry(
        id="45",
        name="Jamba 0.1",
        model_size="52B",
        org="AI21 Labs",
        latest_update="March 2024",
        license_type="Apache 2.0",
        content="Groundbreaking SSM-Transformer Model.",
        link="https://www.ai21.com/blog/introducing-jamba",
    ),
    LlmEntry(
        id="46",
        name="Qwen1.5 32B",
        model_size="32B",
        org="Alibaba",
        latest_update="April 2024",
        license_type="Custom with Usage Restrictions",
        content="Fitting the Capstone of the Qwen1.5 Language Model Series.",
        link="https://huggingface.co/Qwen/Qwen1.5-32B",
    ),
    LlmEntry(
        id="47",
        name="Mamba-7B",
        model_size="7B",
        org="Toyota Research",
        latest_update="April 2024",
        license_type="Apache 2.0",
        content="State-space model with RNN architecture.",
        link="https://huggingface.co/tiiuae/falcon-mamba-7b",
    ),
    LlmEntry(
        id="48",
        name="Mixtral8x22B",
        model_size="141B",
        org="Mistral AI",
        latest_update="April 2024",
        license_type="Apache 2.0",
        content="Cheaper, Better, Faster, Stronger: Advanced mixture of experts model.",
        link="https://huggingface.co/mistralai/Mixtral-8x7B-v0.1",
    ),
    LlmEntry(
        id="49",
        name="Llama 3",
        model_size="70B",
        org="Meta",
        latest_update="April 2024",
        license_type="Custom with Usage Restrictions",
        content="Meta's latest open model with enhanced capabilities.",
        link="https://www.valuecoders.com/blog/ai-ml/what-is-meta-llama-3-large-language-model",
    ),
    LlmEntry(
        id="50",
        name="Phi-3 Mini",
        model_size="3.8B",
        org="Microsoft",
        latest_update="April 2024",
        license_type="MIT",
        content="Redefining what's possible with small language models.",
        link="https://ollama.com/library/phi3:mini",
    ),
    LlmEntry(
        id="51",
        name="OpenELM",
        model_size="3B",
        org="Apple",
        latest_update="April 2024",
        license_type="Custom Open License",
        content="Efficient Language Model Family with Open Training Framework.",
        link="https://huggingface.co/apple/OpenELM",
    ),
    LlmEntry(
        id="52",
        name="Snowflake Arctic",
        model_size="480B",
        org="Snowflake",
        latest_update="April 2024",
        license_type="Apache 2.0",
        content="The Best LLM for Enterprise AI — Efficiently Intelligent, Truly Open.",
        link="https://huggingface.co/Snowflake/snowflake-arctic-embed-m",
    ),
    LlmEntry(
        id="53",
        name="RWKV 6 v2.1",
        model_size="7B",
        org="BlinkDL",
        latest_update="May 2024",
        license_type="Apache 2.0",
        content="Advanced RNN-based language model with improved performance.",
        link="https://github.com/BlinkDL/RWKV-LM",
    ),
    LlmEntry(
        id="54",
        name="DeepSeek-V2",
        model_size="236B",
        org="DeepSeek AI",
        latest_update="May 2024",
        license_type="Custom with Usage Restrictions",
        content="A Strong, Economical, and Efficient Mixture-of-Experts Language Model.",
        link="https://huggingface.co/deepseek-ai/deepseek-moe-16b-base",
    ),
    LlmEntry(
        id="55",
        name="Phi-4",
        model_size="14B",
        org="Microsoft",
        latest_update="December 2024",
        license_type="MIT",
        content="Advanced reasoning in a compact and efficient model.",
        link="https://huggingface.co/microsoft/phi-4",
    ),
    LlmEntry(
        id="56",
        name="YuLan-Mini",
        model_size="14B",
        org="YuLan Team",
        latest_update="December 2024",
        license_type="MIT",
        content="YuLan-Mini: An Open Data-efficient Language Model.",
        link="https://huggingface.co/yulan-team/YuLan-Mini",
    ),
    LlmEntry(
        id="57",
        name="Selene Mini",
        model_size="8B",
        org="Atla AI",
        latest_update="January 2025",
        license_type="Apache 2.0",
        content="Atla Selene Mini: A General Purpose Evaluation Model.",
        link="https://huggingface.co/AtlaAI/Selene-1-Mini-Llama-3.1-8B",
    ),
    LlmEntry(
        id="58",
        name="Cohere Command",
        model_size="52B",
        org="Cohere",
        latest_update="January 2025",
        license_type="Custom with Usage Restrictions",
        content="Advanced language model optimized for enterprise use cases.",
        link="https://cohere.com/models/command",
    ),
    LlmEntry(
        id="59",
        name="Inflection-2.5",
        model_size="380B",
        org="Inflection AI",
        latest_update="January 2025",
        license_type="Custom with Usage Restrictions",
        content="Pushing the boundaries of conversational AI.",
        link="https://inflection.ai/inflection-2",
    ),
    LlmEntry(
        id="60",
        name="Falcon-11B",
        model_size="11B",
        org="TII",
        latest_update="February 2025",
        license_type="Apache 2.0",
        content="Enhanced version of Falcon with improved reasoning.",
        link="https://huggingface.co/tiiuae/falcon-11B",
    ),
    LlmEntry(
        id="61",
        name="SteerLM",
        model_size="7B",
        org="Intel",
        latest_update="February 2025",
        license_type="Apache 2.0",
        content="Controllable language model with enhanced steering capabilities.",
        link="https://github.com/intel/neural-compressor",
    ),
    LlmEntry(
        id="62",
        name="Gemini Ultra 2",
        model_size="3.5T",
        org="Google",
        latest_update="March 2025",
        license_type="Proprietary",
        content="Next generation multimodal AI system.",
        link="https://deepmind.google/technologies/gemini/",
    ),
    LlmEntry(
        id="63",
        name="Mistral Large",
        model_size="32B",
        org="Mistral AI",
        latest_update="March 2025",
        license_type="Apache 2.0",
        content="Advanced reasoning with enhanced multilingual support.",
        link="https://mistral.ai/news/mistral-large/",
    ),
    LlmEntry(
        id="65",
        name="DeepSeek V2-Lite",
        model_size="16B",
        org="DeepSeek",
        latest_update="March 2025",
        license_type="Apache 2.0",
        content="Mid-size scale mixture of experts model.",
        link="https://github.com/deepseek-ai/DeepSeek-V2",
    ),
    LlmEntry(
        id="71",
        name="Gemma-2",
        model_size="8B",
        org="Google",
        latest_update="May 2025",
        license_type="Custom with Usage Restrictions",
        content="Enhanced version of Gemma with improved performance.",
        link="https://huggingface.co/google/gemma-2b",
    ),
    LlmEntry(
        id="75",
        name="StarCoder",
        model_size="15B",
        org="BigCode",
        latest_update="May 2023",
        license_type="OpenRAIL-M v1",
        content="A State-of-the-Art LLM for Code with 8K context window.",
        link="https://huggingface.co/bigcode/starcoder",
    ),
    LlmEntry(
        id="76",
        name="StarChat Alpha",
        model_size="16B",
        org="HuggingFace",
        latest_update="May 2023",
        license_type="OpenRAIL-M v1",
        content="Creating a Coding Assistant with StarCoder.",
        link="https://huggingface.co/HuggingFaceH4/starchat-alpha",
    ),
    LlmEntry(
        id="77",
        name="Replit Code",
        model_size="3B",
        org="Replit",
        latest_update="May 2023",
        license_type="CC BY-SA-4.0",
        content="Training a SOTA Code LLM in 1 week with infinite context window.",
        link="https://huggingface.co/replit/replit-code-v1-3b",
    ),
    LlmEntry(
        id="78",
        name="CodeT5+",
        model_size="16B",
        org="Salesforce",
        latest_update="May 2023",
        license_type="BSD-3-Clause",
        content="Open Code LLMs for Code Understanding and Generation.",
        link="https://github.com/salesforce/CodeT5/tree/main/CodeT5+",
    ),
    LlmEntry(
        id="79",
        name="Code Llama",
        model_size="34B",
        org="Meta",
        latest_update="August 2023",
        license_type="Apache",
        content="Open Foundation Models for Code. Available in multiple sizes from 7B to 34B parameters.",
        link="https://github.com/facebookresearch/codellama",
    ),
]
